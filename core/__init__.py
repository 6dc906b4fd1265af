# core/__init__.py
"""
core - AWS Reservations CLI 인프라

아키텍처:
    core/
    ├── auth/           # 자격 증명 결정, boto3 세션 생성
    ├── parallel/       # boto3 client (retry), 병렬 조회
    ├── region/         # 리전 이름 검증
    ├── tools/          # 보고서 출력 (Excel)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import settings, get_default_region
    region = get_default_region()  # "us-west-1"

    from core.exceptions import GatewayError, is_access_denied
"""
