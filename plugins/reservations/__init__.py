"""
plugins/reservations - 예약 인스턴스 감사 도구

실행 중인 EC2/RDS 인스턴스를 예약 인스턴스와 대조하여 두 가지를 찾습니다.

- 온디맨드: 예약으로 커버되지 않는 실행 용량 (비용 누수)
- 미사용 예약: 대응하는 실행 리소스가 없는 예약 (매몰 비용)

읽기 전용 보고서이며 클라우드 상태를 변경하지 않습니다.

Usage:
    from plugins.reservations import audit_regions, render_text

    audits = audit_regions(session, ["us-west-1"])
    print(render_text(audits))
"""

from .audit import audit_regions, run_audit
from .classify import classify
from .collector import REQUIRED_PERMISSIONS, ReservationGateway
from .normalize import normalize
from .reconcile import Reconciler, reconcile
from .report import print_console, render_text, to_dict, write_excel, write_json
from .types import (
    Classification,
    EC2GroupKey,
    LifecycleState,
    ListingSource,
    NormalizedRecord,
    RDSGroupKey,
    RegionAudit,
    ResourceKind,
)

__all__ = [
    "REQUIRED_PERMISSIONS",
    "Classification",
    "EC2GroupKey",
    "LifecycleState",
    "ListingSource",
    "NormalizedRecord",
    "RDSGroupKey",
    "Reconciler",
    "RegionAudit",
    "ReservationGateway",
    "ResourceKind",
    "audit_regions",
    "classify",
    "normalize",
    "print_console",
    "reconcile",
    "render_text",
    "run_audit",
    "to_dict",
    "write_excel",
    "write_json",
]
