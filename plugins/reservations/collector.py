"""
plugins/reservations/collector.py - EC2/RDS 인스턴스 및 예약 목록 수집

리전 하나에 대해 네 가지 원본 목록을 조회합니다.

- list_running_ec2: DescribeInstances (Reservations[].Instances[])
- list_reserved_ec2: DescribeReservedInstances (ReservedInstances[])
- list_running_rds: DescribeDBInstances (DBInstances[])
- list_reserved_rds: DescribeReservedDBInstances (ReservedDBInstances[])

재시도/타임아웃은 botocore client 설정(get_client)이 담당합니다.
조회 실패는 GatewayError로 감싸서 그대로 전파합니다 (부분 결과 없음).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import GatewayError
from core.parallel import get_client

if TYPE_CHECKING:
    from boto3 import Session

logger = logging.getLogger(__name__)

# 필요한 AWS 권한 목록
REQUIRED_PERMISSIONS = {
    "read": [
        "ec2:DescribeInstances",
        "ec2:DescribeReservedInstances",
        "rds:DescribeDBInstances",
        "rds:DescribeReservedDBInstances",
    ],
}


def _records(container: Any, key: str) -> list[dict]:
    """응답에서 목록 추출 (최상위 형식이 잘못되면 TypeError)"""
    if not isinstance(container, dict):
        raise TypeError(f"응답 형식 오류: dict 예상, {type(container).__name__} 수신")
    items = container.get(key) or []
    if not isinstance(items, list):
        raise TypeError(f"응답 형식 오류: {key}는 list여야 함")
    return items


class ReservationGateway:
    """리전 하나의 EC2/RDS 목록 조회기

    client는 생성 시점(메인 스레드)에 만들어 두고, 조회 메서드는
    여러 스레드에서 동시에 호출될 수 있습니다.
    """

    def __init__(self, session: Session, region: str):
        self.region = region
        self._ec2 = get_client(session, "ec2", region_name=region)
        self._rds = get_client(session, "rds", region_name=region)

    def _wrap(self, service: str, operation: str, error: Exception) -> GatewayError:
        logger.debug(f"{service}.{operation} 실패 [{self.region}]: {error}")
        return GatewayError.from_exception(service=service, operation=operation, error=error, region=self.region)

    def list_running_ec2(self) -> list[dict]:
        """실행 중(및 종료된) EC2 인스턴스 목록"""
        instances: list[dict] = []
        try:
            paginator = self._ec2.get_paginator("describe_instances")
            for page in paginator.paginate():
                for reservation in _records(page, "Reservations"):
                    instances.extend(_records(reservation, "Instances"))
        except (ClientError, BotoCoreError, TypeError) as e:
            raise self._wrap("ec2", "describe_instances", e) from e

        logger.debug(f"EC2 인스턴스 {len(instances)}개 [{self.region}]")
        return instances

    def list_reserved_ec2(self) -> list[dict]:
        """EC2 예약 인스턴스 목록 (페이지네이션 없는 API)"""
        try:
            response = self._ec2.describe_reserved_instances()
            reserved = _records(response, "ReservedInstances")
        except (ClientError, BotoCoreError, TypeError) as e:
            raise self._wrap("ec2", "describe_reserved_instances", e) from e

        logger.debug(f"EC2 예약 {len(reserved)}개 [{self.region}]")
        return reserved

    def list_running_rds(self) -> list[dict]:
        """RDS DB 인스턴스 목록"""
        instances: list[dict] = []
        try:
            paginator = self._rds.get_paginator("describe_db_instances")
            for page in paginator.paginate():
                instances.extend(_records(page, "DBInstances"))
        except (ClientError, BotoCoreError, TypeError) as e:
            raise self._wrap("rds", "describe_db_instances", e) from e

        logger.debug(f"RDS 인스턴스 {len(instances)}개 [{self.region}]")
        return instances

    def list_reserved_rds(self) -> list[dict]:
        """RDS 예약 DB 인스턴스 목록"""
        reserved: list[dict] = []
        try:
            paginator = self._rds.get_paginator("describe_reserved_db_instances")
            for page in paginator.paginate():
                reserved.extend(_records(page, "ReservedDBInstances"))
        except (ClientError, BotoCoreError, TypeError) as e:
            raise self._wrap("rds", "describe_reserved_db_instances", e) from e

        logger.debug(f"RDS 예약 {len(reserved)}개 [{self.region}]")
        return reserved
