"""
core/parallel/executor.py - 독립 작업 병렬 실행기

서로 독립적인 조회 작업(예: running/reserved x EC2/RDS 목록)을
ThreadPoolExecutor로 동시에 실행하고, 모든 결과를 join한 뒤 반환합니다.

실행 규칙:
- 모든 작업이 끝나야 결과를 반환 (부분 결과 없음)
- 첫 실패 시 대기 중인 작업을 취소하고 해당 예외를 그대로 전파 (fail-fast)

Example:
    from core.parallel import fetch_all

    results = fetch_all(
        {
            "running_ec2": gateway.list_running_ec2,
            "reserved_ec2": gateway.list_reserved_ec2,
        },
        max_workers=4,
    )
    running = results["running_ec2"]
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fetch_all(
    tasks: Mapping[str, Callable[[], T]],
    max_workers: int = 4,
) -> dict[str, T]:
    """작업들을 병렬 실행하고 모든 결과를 join

    Args:
        tasks: 작업 이름 → 인자 없는 호출 가능 객체
        max_workers: 최대 동시 스레드 수

    Returns:
        작업 이름 → 결과 (tasks와 같은 순서)

    Raises:
        작업에서 발생한 첫 번째 예외 (가공 없이 전파)
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    if not tasks:
        return {}

    start_time = time.monotonic()
    workers = min(max_workers, len(tasks))
    logger.debug(f"병렬 조회 시작: {len(tasks)}개 작업, max_workers={workers}")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {name: executor.submit(func) for name, func in tasks.items()}
        done, pending = wait(futures.values(), return_when=FIRST_EXCEPTION)

        failed = [name for name, future in futures.items() if future in done and future.exception() is not None]
        if failed:
            for future in pending:
                future.cancel()
            logger.debug(f"조회 실패로 중단: {failed[0]} (취소 {len(pending)}개)")
            # 제출 순서상 첫 실패를 전파
            raise futures[failed[0]].exception()  # type: ignore[misc]

    elapsed = time.monotonic() - start_time
    logger.debug(f"병렬 조회 완료: {len(tasks)}개 작업, {elapsed:.2f}초")

    return {name: future.result() for name, future in futures.items()}
