"""
plugins/reservations/classify.py - 순 개수 분류

- net > 0: 온디맨드 (예약이 커버하지 못하는 실행 용량), 값은 net
- net < 0: 미사용 예약 (실행 용량보다 많은 예약), 값은 -net
- net == 0: 완전히 상계됨, 보고하지 않음

부호 검사로 나누므로 하나의 키는 두 버킷 중 최대 하나에만 들어갑니다.
"""

from __future__ import annotations

from collections.abc import Mapping

from .types import Classification, K


def classify(net_counts: Mapping[K, int]) -> Classification[K]:
    """순 개수 매핑을 온디맨드/미사용 예약 버킷으로 분류"""
    result: Classification[K] = Classification()

    for key, net in net_counts.items():
        if net > 0:
            result.on_demand[key] = net
        elif net < 0:
            result.unused[key] = -net

    return result
