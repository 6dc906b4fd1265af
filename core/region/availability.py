"""
core/region/availability.py - 리전 이름 검증

botocore에 내장된 파티션 데이터(endpoints.json)로 리전 이름을 확인합니다.
네트워크 호출이 없으므로 자격 증명 없이 동작합니다.

검증 규칙:
- 형식이 리전 코드가 아니면 (예: "us-west", "seoul") ValidationError
- 형식은 맞지만 botocore 데이터에 없으면 경고 로그 후 허용 (신규 리전)
- 중복 리전은 입력 순서를 유지하며 제거

Usage:
    from core.region import validate_regions

    regions = validate_regions(["us-west-1", "us-east-1", "us-west-1"])
    # ["us-west-1", "us-east-1"]
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from functools import lru_cache

from core.exceptions import ValidationError

logger = logging.getLogger(__name__)

# 리전 코드 형식: us-west-1, ap-northeast-2, us-gov-west-1, cn-north-1
REGION_PATTERN = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d+$")


@lru_cache(maxsize=1)
def get_known_regions() -> frozenset[str]:
    """botocore 파티션 데이터에 정의된 EC2 리전 전체 (모든 파티션)"""
    import boto3

    session = boto3.session.Session()
    regions: set[str] = set()
    for partition in session.get_available_partitions():
        regions.update(session.get_available_regions("ec2", partition_name=partition))
    return frozenset(regions)


def validate_region(region: str) -> str:
    """리전 이름 검증

    Args:
        region: 리전 코드

    Returns:
        공백 제거된 리전 코드

    Raises:
        ValidationError: 리전 코드 형식이 아닌 경우
    """
    name = (region or "").strip()
    if not REGION_PATTERN.match(name):
        raise ValidationError(field="region", value=region, expected="us-west-1 형식의 리전 코드")

    if name not in get_known_regions():
        logger.warning(f"botocore 데이터에 없는 리전입니다 (신규 리전일 수 있음): {name}")

    return name


def validate_regions(regions: Iterable[str]) -> list[str]:
    """리전 목록 검증 (중복 제거, 순서 유지)

    Raises:
        ValidationError: 목록이 비었거나 잘못된 리전이 있는 경우
    """
    result: list[str] = []
    for region in regions:
        name = validate_region(region)
        if name not in result:
            result.append(name)

    if not result:
        raise ValidationError(field="region", value="", expected="하나 이상의 리전")

    return result
