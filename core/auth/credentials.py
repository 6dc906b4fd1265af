"""
core/auth/credentials.py - 자격 증명 결정 및 boto3 세션 생성

우선순위:
    1. 명령줄 옵션 (--accesskey / --secretkey)
    2. 프로파일 (--profile)
    3. 환경변수 AWS_ACCESS_KEY_ID 또는 AWS_ACCESS_KEY,
       AWS_SECRET_ACCESS_KEY 또는 AWS_SECRET_KEY
    4. boto3 기본 체인 (AWS_PROFILE, ~/.aws/credentials, 인스턴스 역할 등)

액세스 키와 시크릿 키 중 하나만 주어지면 ConfigError입니다.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

import boto3

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

ACCESS_KEY_ENV_VARS = ("AWS_ACCESS_KEY_ID", "AWS_ACCESS_KEY")
SECRET_KEY_ENV_VARS = ("AWS_SECRET_ACCESS_KEY", "AWS_SECRET_KEY")


@dataclass
class CredentialsConfig:
    """결정된 자격 증명 설정

    Attributes:
        access_key_id: 정적 액세스 키 (없으면 None)
        secret_access_key: 정적 시크릿 키
        session_token: 세션 토큰 (AWS_SESSION_TOKEN)
        profile_name: 프로파일 이름 (정적 키가 없을 때만 사용)
        source: 자격 증명 출처 ("flags", "env", "profile", "default")
    """

    access_key_id: str | None = None
    secret_access_key: str | None = None
    session_token: str | None = None
    profile_name: str | None = None
    source: str = "default"

    @property
    def is_static(self) -> bool:
        return bool(self.access_key_id and self.secret_access_key)


def _first_env(names: tuple[str, ...], env: Mapping[str, str]) -> str | None:
    for name in names:
        value = env.get(name)
        if value:
            return value
    return None


def resolve_credentials(
    access_key: str | None = None,
    secret_key: str | None = None,
    profile: str | None = None,
    env: Mapping[str, str] | None = None,
) -> CredentialsConfig:
    """옵션과 환경변수로부터 자격 증명 결정

    Args:
        access_key: --accesskey 값
        secret_key: --secretkey 값
        profile: --profile 값
        env: 환경변수 (기본: os.environ)

    Returns:
        CredentialsConfig

    Raises:
        ConfigError: 키 쌍 중 하나만 주어진 경우
    """
    env = os.environ if env is None else env

    if access_key or secret_key:
        if not (access_key and secret_key):
            raise ConfigError("accesskey", "--accesskey와 --secretkey는 함께 지정해야 합니다")
        return CredentialsConfig(
            access_key_id=access_key,
            secret_access_key=secret_key,
            source="flags",
        )

    # 프로파일이 명시되면 환경변수 키보다 우선
    if profile:
        return CredentialsConfig(profile_name=profile, source="profile")

    env_access = _first_env(ACCESS_KEY_ENV_VARS, env)
    env_secret = _first_env(SECRET_KEY_ENV_VARS, env)
    if env_access or env_secret:
        if not (env_access and env_secret):
            raise ConfigError("env", "AWS 액세스 키와 시크릿 키 환경변수는 함께 지정해야 합니다")
        return CredentialsConfig(
            access_key_id=env_access,
            secret_access_key=env_secret,
            session_token=env.get("AWS_SESSION_TOKEN") or None,
            source="env",
        )

    return CredentialsConfig(source="default")


def create_session(credentials: CredentialsConfig, region: str | None = None) -> boto3.Session:
    """자격 증명 설정으로 boto3 Session 생성"""
    logger.debug(f"세션 생성: source={credentials.source}, region={region}")

    if credentials.is_static:
        return boto3.Session(
            aws_access_key_id=credentials.access_key_id,
            aws_secret_access_key=credentials.secret_access_key,
            aws_session_token=credentials.session_token,
            region_name=region,
        )

    if credentials.profile_name:
        from botocore.exceptions import ProfileNotFound

        try:
            return boto3.Session(profile_name=credentials.profile_name, region_name=region)
        except ProfileNotFound as e:
            raise ConfigError("profile", f"프로파일을 찾을 수 없습니다: {credentials.profile_name}", cause=e) from e

    return boto3.Session(region_name=region)
