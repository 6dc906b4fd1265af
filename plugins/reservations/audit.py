"""
plugins/reservations/audit.py - 예약 인스턴스 감사 패스

리전 하나에 대한 흐름:
    1. 네 가지 목록을 병렬 조회하고 모두 join (하나라도 실패하면 즉시 중단)
    2. 레코드 정규화
    3. 종류별(EC2, RDS) 순 개수 누적
    4. 온디맨드/미사용 예약 분류

조회가 모두 끝난 뒤에만 매핑을 만들므로 분류는 항상 완성된 매핑을 읽습니다.
클라우드 상태는 절대 변경하지 않습니다 (읽기 전용 보고서).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from core.config import get_fetch_max_workers
from core.parallel import fetch_all

from .classify import classify
from .collector import ReservationGateway
from .normalize import normalize_all
from .reconcile import Reconciler
from .types import ListingSource, RegionAudit, ResourceKind

if TYPE_CHECKING:
    from boto3 import Session

logger = logging.getLogger(__name__)

# 목록 이름 → (종류, 출처)
LISTINGS: dict[str, tuple[ResourceKind, ListingSource]] = {
    "running_ec2": (ResourceKind.EC2, ListingSource.RUNNING),
    "reserved_ec2": (ResourceKind.EC2, ListingSource.RESERVED),
    "running_rds": (ResourceKind.RDS, ListingSource.RUNNING),
    "reserved_rds": (ResourceKind.RDS, ListingSource.RESERVED),
}


class Gateway(Protocol):
    """감사에 필요한 목록 조회 인터페이스"""

    region: str

    def list_running_ec2(self) -> list[dict]: ...

    def list_reserved_ec2(self) -> list[dict]: ...

    def list_running_rds(self) -> list[dict]: ...

    def list_reserved_rds(self) -> list[dict]: ...


def run_audit(gateway: Gateway, max_workers: int | None = None) -> RegionAudit:
    """리전 하나에 대한 감사 패스 실행

    Raises:
        GatewayError: 목록 조회 실패 (분류 전에 중단)
    """
    workers = max_workers or get_fetch_max_workers()
    tasks: dict[str, Callable[[], list[dict]]] = {name: getattr(gateway, f"list_{name}") for name in LISTINGS}

    raw = fetch_all(tasks, max_workers=workers)

    reconcilers = {ResourceKind.EC2: Reconciler(), ResourceKind.RDS: Reconciler()}
    for name, (kind, source) in LISTINGS.items():
        records = normalize_all(raw[name], kind, source)
        if source is ListingSource.RUNNING:
            reconcilers[kind].add_running(records)
        else:
            reconcilers[kind].add_reserved(records)

    audit = RegionAudit(
        region=gateway.region,
        ec2=classify(reconcilers[ResourceKind.EC2].net_counts()),
        rds=classify(reconcilers[ResourceKind.RDS].net_counts()),
        record_counts={name: len(records) for name, records in raw.items()},
    )

    logger.info(
        f"[{audit.region}] EC2 온디맨드 {audit.ec2.on_demand_total}, 미사용 예약 {audit.ec2.unused_total} / "
        f"RDS 온디맨드 {audit.rds.on_demand_total}, 미사용 예약 {audit.rds.unused_total}"
    )
    return audit


def audit_regions(
    session: Session,
    regions: list[str],
    max_workers: int | None = None,
    gateway_factory: Callable[[Session, str], Gateway] = ReservationGateway,
) -> list[RegionAudit]:
    """리전별 감사 패스를 순서대로 실행

    한 리전이라도 실패하면 GatewayError를 그대로 전파하며,
    이미 끝난 리전 결과도 반환하지 않습니다.
    """
    results: list[RegionAudit] = []
    for region in regions:
        logger.debug(f"감사 시작: {region}")
        results.append(run_audit(gateway_factory(session, region), max_workers=max_workers))
    return results
