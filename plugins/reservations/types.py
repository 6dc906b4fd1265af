"""
plugins/reservations/types.py - 예약 인스턴스 감사 데이터 모델

EC2/RDS 인스턴스와 예약(Reserved Instance)을 같은 그룹 키로 정규화하여
비교할 수 있도록 하는 타입들입니다.

그룹 키:
- EC2: (인스턴스 클래스, VPC 여부)
- RDS: (인스턴스 클래스, 엔진/제품, Multi-AZ 여부)

같은 그룹 키를 가진 인스턴스는 예약 매칭에서 서로 대체 가능합니다.
예약은 특정 인스턴스가 아니라 그룹 키만 커버합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar, Union


class LifecycleState(Enum):
    """레코드가 현재 용량을 소비/예약하는지 여부"""

    UNKNOWN = 0
    ACTIVE = 1

    def __str__(self) -> str:
        if self is LifecycleState.ACTIVE:
            return "active"
        return "unsupported state"


class ResourceKind(Enum):
    """리소스 종류"""

    EC2 = "ec2"
    RDS = "rds"


class ListingSource(Enum):
    """레코드 출처 목록 (같은 종류라도 원본 형식이 다름)"""

    RUNNING = "running"
    RESERVED = "reserved"


@dataclass(frozen=True, order=True)
class EC2GroupKey:
    """EC2 그룹 키"""

    instance_class: str  # 예: m3.large
    vpc: bool  # VPC 소속 여부

    @property
    def vpc_label(self) -> str:
        return "VPC" if self.vpc else ""

    def to_dict(self) -> dict:
        return {"instance_class": self.instance_class, "vpc": self.vpc}


@dataclass(frozen=True, order=True)
class RDSGroupKey:
    """RDS 그룹 키"""

    instance_class: str  # 예: db.m3.large
    product: str  # 엔진/제품 (mysql, postgres)
    multi_az: bool  # Multi-AZ 배포 여부

    @property
    def multi_az_label(self) -> str:
        return "MultiAZ" if self.multi_az else ""

    def to_dict(self) -> dict:
        return {"instance_class": self.instance_class, "product": self.product, "multi_az": self.multi_az}


GroupKey = Union[EC2GroupKey, RDSGroupKey]
K = TypeVar("K", EC2GroupKey, RDSGroupKey)


@dataclass(frozen=True)
class NormalizedRecord(Generic[K]):
    """정규화된 레코드: (그룹 키, 개수, 상태)"""

    key: K
    count: int
    state: LifecycleState

    @property
    def is_active(self) -> bool:
        return self.state is LifecycleState.ACTIVE


@dataclass
class Classification(Generic[K]):
    """순 개수 분류 결과

    Attributes:
        on_demand: 예약으로 커버되지 않는 실행 용량 (그룹 키 → 양수)
        unused: 실행 중인 리소스가 없는 예약 용량 (그룹 키 → 양수)
    """

    on_demand: dict[K, int] = field(default_factory=dict)
    unused: dict[K, int] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.on_demand and not self.unused

    @property
    def on_demand_total(self) -> int:
        return sum(self.on_demand.values())

    @property
    def unused_total(self) -> int:
        return sum(self.unused.values())


@dataclass
class RegionAudit:
    """리전 하나에 대한 감사 결과"""

    region: str
    ec2: Classification[EC2GroupKey] = field(default_factory=Classification)
    rds: Classification[RDSGroupKey] = field(default_factory=Classification)

    # 조회된 원본 레코드 수 (목록 이름 → 개수)
    record_counts: dict[str, int] = field(default_factory=dict)

    @property
    def is_clean(self) -> bool:
        """온디맨드/미사용 예약이 하나도 없는지"""
        return self.ec2.is_empty and self.rds.is_empty
