"""
목적:
- 용량 K를 넘지 않는 온라인 최근접 후보 집합을 제공한다.

설명:
- 후보를 (거리, 삽입 순번) 키의 최대 힙에 보관하며 offer 한 번은 O(log K)다.
- 용량을 초과하면 거리가 가장 큰 후보를 제거하고, 거리가 같으면 가장 나중에 삽입된 후보를 제거한다.
- snapshot은 상태를 바꾸지 않고 (거리, 삽입 순번) 오름차순 목록을 반환한다.
- 스레드 안전하지 않으므로 인스턴스는 워커 하나 또는 병합 단계 하나가 단독으로 소유한다.

디자인 패턴:
- 유계 우선순위 큐(Bounded Priority Queue).

참조:
- src_py/partition_knn/worker/partition_worker.py
- src_py/partition_knn/merge/vote.py
"""

from __future__ import annotations

import heapq
from typing import Iterable

from partition_knn.contracts.candidate_models import LabeledCandidate
from partition_knn.exceptions import ConfigurationError


class BoundedTopK:
    """거리 기준 상위 K개(최소 거리) 후보 추적기."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ConfigurationError(f"capacity는 1 이상이어야 합니다: capacity={capacity}")
        self._capacity = capacity
        # heapq는 최소 힙이므로 키를 음수로 저장해 최대 (distance, sequence)가 루트에 오게 한다.
        self._heap: list[tuple[float, int, LabeledCandidate]] = []
        self._sequence = 0

    @property
    def capacity(self) -> int:
        """최대 보관 개수(K)를 반환한다."""
        return self._capacity

    @property
    def offered(self) -> int:
        """지금까지 offer된 후보 수를 반환한다."""
        return self._sequence

    def __len__(self) -> int:
        return len(self._heap)

    def offer(self, candidate: LabeledCandidate) -> None:
        """후보를 삽입하고 용량을 넘으면 가장 먼 후보를 제거한다."""
        entry = (-candidate.distance, -self._sequence, candidate)
        self._sequence += 1
        if len(self._heap) < self._capacity:
            heapq.heappush(self._heap, entry)
            return
        heapq.heappushpop(self._heap, entry)

    def extend(self, candidates: Iterable[LabeledCandidate]) -> None:
        """여러 후보를 순서대로 offer한다."""
        for candidate in candidates:
            self.offer(candidate)

    def snapshot(self) -> list[LabeledCandidate]:
        """보관 중인 후보를 (거리, 삽입 순번) 오름차순으로 반환한다."""
        ordered = sorted(self._heap, key=lambda entry: (-entry[0], -entry[1]))
        return [candidate for _, _, candidate in ordered]
