"""
core/parallel - 병렬 처리 모듈

독립적인 AWS 조회 작업을 병렬로 안전하게 처리합니다.

주요 구성 요소:
- get_client: retry 설정이 적용된 boto3 client 생성
- fetch_all: 독립 작업 병렬 실행 + join (fail-fast)

Example:
    from core.parallel import fetch_all, get_client

    ec2 = get_client(session, "ec2", region_name="us-west-1")
    results = fetch_all({"instances": lambda: ec2.describe_instances()}, max_workers=4)
"""

from .client import get_client
from .executor import fetch_all

__all__: list[str] = [
    "get_client",
    "fetch_all",
]
