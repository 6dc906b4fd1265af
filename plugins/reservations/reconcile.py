"""
plugins/reservations/reconcile.py - 예약 상계 엔진

그룹 키별 순 개수(net count)를 누적합니다.

    net[key] = Σ(활성 실행 개수) - Σ(활성 예약 개수)

- 활성 실행 레코드: net[key] += count
- 활성 예약 레코드: net[key] -= count
- 비활성 레코드는 완전히 건너뜀 (0 값 키도 만들지 않음)

덧셈은 교환 법칙이 성립하므로 입력 순서와 무관하게 결과가 같습니다.
매핑은 Reconciler 인스턴스가 단독 소유하며 한 번의 감사 패스 동안만 존재합니다.
EC2와 RDS는 각각 별도의 Reconciler로 처리합니다.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Generic

from .types import K, NormalizedRecord

logger = logging.getLogger(__name__)


class Reconciler(Generic[K]):
    """그룹 키별 순 개수 누적기"""

    def __init__(self) -> None:
        self._net: defaultdict[K, int] = defaultdict(int)
        self.skipped = 0

    def add_running(self, records: Iterable[NormalizedRecord[K]]) -> None:
        """활성 실행 레코드를 더함"""
        for record in records:
            if not record.is_active:
                self._skip(record)
                continue
            self._net[record.key] += record.count

    def add_reserved(self, records: Iterable[NormalizedRecord[K]]) -> None:
        """활성 예약 레코드를 뺌"""
        for record in records:
            if not record.is_active:
                self._skip(record)
                continue
            self._net[record.key] -= record.count

    def _skip(self, record: NormalizedRecord[K]) -> None:
        self.skipped += 1
        logger.debug(f"비활성 레코드 제외: {record.key} ({record.state})")

    def net_counts(self) -> dict[K, int]:
        """누적된 순 개수 (복사본)"""
        return dict(self._net)


def reconcile(
    running: Iterable[NormalizedRecord[K]],
    reserved: Iterable[NormalizedRecord[K]],
) -> dict[K, int]:
    """실행/예약 레코드로 순 개수 매핑 생성"""
    reconciler: Reconciler[K] = Reconciler()
    reconciler.add_running(running)
    reconciler.add_reserved(reserved)
    return reconciler.net_counts()
