"""
plugins/reservations/normalize.py - 리소스 정규화

boto3 응답 레코드(dict)를 (그룹 키, 개수, 상태)로 변환합니다.

필드 기본값 규칙 (모든 필드 읽기에 동일 적용):
- 문자열 누락/None → ""
- 정수 누락/None → 0
- 불리언 누락/None → False

정규화는 예외를 발생시키지 않습니다. 필드가 잘못된 레코드 하나 때문에
리전 전체 감사가 실패하지 않도록 기본값으로 흡수합니다.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .types import (
    EC2GroupKey,
    LifecycleState,
    ListingSource,
    NormalizedRecord,
    RDSGroupKey,
    ResourceKind,
)

# 용량을 점유하는 EC2 인스턴스 상태 (terminated 제외)
EC2_ACTIVE_STATES = frozenset({"pending", "running", "shutting-down", "stopping", "stopped"})

# 예약의 활성 상태 (EC2/RDS 공통)
RESERVATION_ACTIVE_STATE = "active"

# 예약에는 VPC 플래그가 없어 ProductDescription으로 판단 (예: "Linux/UNIX (Amazon VPC)")
VPC_PRODUCT_MARKER = "Amazon VPC"


# =============================================================================
# 필드 읽기 (기본값 적용)
# =============================================================================


def field_str(record: Mapping[str, Any] | None, name: str) -> str:
    if not isinstance(record, Mapping):
        return ""
    value = record.get(name)
    return value if isinstance(value, str) else ""


def field_int(record: Mapping[str, Any] | None, name: str) -> int:
    if not isinstance(record, Mapping):
        return 0
    value = record.get(name)
    # bool은 int의 하위 클래스이므로 제외
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def field_bool(record: Mapping[str, Any] | None, name: str) -> bool:
    if not isinstance(record, Mapping):
        return False
    value = record.get(name)
    return value if isinstance(value, bool) else False


def _reservation_state(record: Mapping[str, Any]) -> LifecycleState:
    if field_str(record, "State") == RESERVATION_ACTIVE_STATE:
        return LifecycleState.ACTIVE
    return LifecycleState.UNKNOWN


# =============================================================================
# 종류별 정규화
# =============================================================================


def normalize_running_ec2(record: Mapping[str, Any]) -> NormalizedRecord[EC2GroupKey]:
    """DescribeInstances의 Instance → 정규화 레코드 (개수는 항상 1)"""
    state_name = field_str(record.get("State") if isinstance(record, Mapping) else None, "Name")
    state = LifecycleState.ACTIVE if state_name in EC2_ACTIVE_STATES else LifecycleState.UNKNOWN

    return NormalizedRecord(
        key=EC2GroupKey(
            instance_class=field_str(record, "InstanceType"),
            vpc=len(field_str(record, "VpcId")) > 0,
        ),
        count=1,
        state=state,
    )


def normalize_reserved_ec2(record: Mapping[str, Any]) -> NormalizedRecord[EC2GroupKey]:
    """DescribeReservedInstances의 ReservedInstances → 정규화 레코드"""
    return NormalizedRecord(
        key=EC2GroupKey(
            instance_class=field_str(record, "InstanceType"),
            vpc=VPC_PRODUCT_MARKER in field_str(record, "ProductDescription"),
        ),
        count=field_int(record, "InstanceCount"),
        state=_reservation_state(record),
    )


def normalize_running_rds(record: Mapping[str, Any]) -> NormalizedRecord[RDSGroupKey]:
    """DescribeDBInstances의 DBInstance → 정규화 레코드

    목록에는 살아있는 인스턴스만 나오므로 상태는 항상 ACTIVE입니다.
    """
    return NormalizedRecord(
        key=RDSGroupKey(
            instance_class=field_str(record, "DBInstanceClass"),
            product=field_str(record, "Engine"),
            multi_az=field_bool(record, "MultiAZ"),
        ),
        count=1,
        state=LifecycleState.ACTIVE,
    )


def normalize_reserved_rds(record: Mapping[str, Any]) -> NormalizedRecord[RDSGroupKey]:
    """DescribeReservedDBInstances의 ReservedDBInstance → 정규화 레코드"""
    return NormalizedRecord(
        key=RDSGroupKey(
            instance_class=field_str(record, "DBInstanceClass"),
            product=field_str(record, "ProductDescription"),
            multi_az=field_bool(record, "MultiAZ"),
        ),
        count=field_int(record, "DBInstanceCount"),
        state=_reservation_state(record),
    )


NORMALIZERS: dict[tuple[ResourceKind, ListingSource], Callable[[Mapping[str, Any]], NormalizedRecord]] = {
    (ResourceKind.EC2, ListingSource.RUNNING): normalize_running_ec2,
    (ResourceKind.EC2, ListingSource.RESERVED): normalize_reserved_ec2,
    (ResourceKind.RDS, ListingSource.RUNNING): normalize_running_rds,
    (ResourceKind.RDS, ListingSource.RESERVED): normalize_reserved_rds,
}


def normalize(record: Mapping[str, Any], kind: ResourceKind, source: ListingSource) -> NormalizedRecord:
    """종류/출처에 맞는 정규화 함수로 변환"""
    return NORMALIZERS[(kind, source)](record)


def normalize_all(
    records: list[Mapping[str, Any]], kind: ResourceKind, source: ListingSource
) -> list[NormalizedRecord]:
    normalizer = NORMALIZERS[(kind, source)]
    return [normalizer(record) for record in records]
