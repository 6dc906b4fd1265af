"""
core/config.py - 중앙 설정 관리

애플리케이션 전역 설정과 환경변수 헬퍼를 제공합니다.
설정 파일은 사용하지 않으며, 모든 값은 상수 또는 환경변수에서 옵니다.

Usage:
    from core.config import settings, get_default_region

    region = get_default_region()  # AWS_REGION > AWS_DEFAULT_REGION > "us-west-1"
    workers = settings.FETCH_MAX_WORKERS
"""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    """애플리케이션 설정 (불변)"""

    # 기본 리전
    DEFAULT_REGION: str = "us-west-1"

    # API 호출
    API_CONNECT_TIMEOUT: int = 10  # 초
    API_READ_TIMEOUT: int = 30  # 초
    API_MAX_ATTEMPTS: int = 5
    API_RETRY_MODE: str = "adaptive"

    # 목록 조회 병렬 처리 (running/reserved x EC2/RDS = 4)
    FETCH_MAX_WORKERS: int = 4

    # 출력
    DEFAULT_LANG: str = "ko"
    OUTPUT_FILE_PREFIX: str = "reservations"


settings = Settings()

# 출력 형식
OUTPUT_FORMATS = ("console", "text", "json", "excel")


# =============================================================================
# 프로젝트 경로
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 디렉토리"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """버전 문자열 반환 (version.txt, 없으면 0.0.0)"""
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        return "0.0.0"


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(name: str, default: bool = False) -> bool:
    """불리언 환경변수 읽기 ("1", "true", "yes", "on" → True)"""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_env_int(name: str, default: int = 0) -> int:
    """정수 환경변수 읽기 (변환 실패 시 기본값)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def get_default_region() -> str:
    """기본 리전 (AWS_REGION > AWS_DEFAULT_REGION > settings.DEFAULT_REGION)"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or settings.DEFAULT_REGION


def get_fetch_max_workers() -> int:
    """목록 조회 워커 수 (AWS_RESERVATIONS_MAX_WORKERS, 최소 1)"""
    return max(1, get_env_int("AWS_RESERVATIONS_MAX_WORKERS", settings.FETCH_MAX_WORKERS))
