"""
core/parallel/client.py - boto3 client 생성 헬퍼

Retry(adaptive 모드) + 타임아웃이 설정된 boto3 client를 생성합니다.
재시도는 botocore가 담당하며, 감사 로직은 재시도하지 않습니다.

Example:
    from core.parallel.client import get_client

    # 기본 설정 (adaptive retry, max 5회)
    ec2 = get_client(session, "ec2", region_name="us-west-1")

    # 커스텀 설정
    rds = get_client(session, "rds", region_name="us-west-1", max_attempts=10)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

from core.config import settings

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = settings.API_MAX_ATTEMPTS
DEFAULT_RETRY_MODE: RetryMode = cast(RetryMode, settings.API_RETRY_MODE)
DEFAULT_CONNECT_TIMEOUT = settings.API_CONNECT_TIMEOUT
DEFAULT_READ_TIMEOUT = settings.API_READ_TIMEOUT
DEFAULT_MAX_POOL_CONNECTIONS = 10  # FETCH_MAX_WORKERS 이상


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    **kwargs: Any,
) -> Any:
    """Retry가 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (ec2, rds)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (기본: 5)
        retry_mode: 재시도 모드 ('adaptive' 또는 'standard')
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        max_pool_connections=DEFAULT_MAX_POOL_CONNECTIONS,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
