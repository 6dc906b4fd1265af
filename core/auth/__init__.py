# core/auth/__init__.py
"""
AWS 인증 모듈 (core/auth)

명령줄 옵션, 환경변수, 프로파일에서 자격 증명을 결정하고
boto3 Session을 생성합니다.

사용 예시:
    from core.auth import resolve_credentials, create_session

    credentials = resolve_credentials(access_key=None, secret_key=None, profile="prod")
    session = create_session(credentials, region="us-west-1")
"""

from .credentials import CredentialsConfig, create_session, resolve_credentials

__all__ = [
    "CredentialsConfig",
    "create_session",
    "resolve_credentials",
]
