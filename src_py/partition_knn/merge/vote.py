"""
목적:
- 파티션별 후보 집합을 전역 top-K로 병합하고 다수결로 최종 레이블을 결정한다.

설명:
- 파티션 출력은 partition_id 오름차순, 파티션 내부는 스냅샷 순서로 전역 추적기에 offer한다.
  도착 순서와 무관하게 삽입 순번이 고정되므로 거리 동률 제거 규칙이 결정적으로 동작한다.
- 득표 동률은 스냅샷 순서에서 먼저 등장한 레이블, 즉 가장 가까운 이웃을 가진 레이블이 이긴다.
- 후보가 하나도 없으면 EmptyInputError를 발생시키며 기본 레이블을 만들지 않는다.

디자인 패턴:
- 팬인 집계기(Fan-in Aggregator).

참조:
- src_py/partition_knn/topk/tracker.py
- src_py/partition_knn/orchestration/coordinator.py
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from partition_knn.contracts.candidate_models import (
    ClassificationMetrics,
    ClassificationResult,
    LabeledCandidate,
    PartitionResult,
)
from partition_knn.exceptions import ConfigurationError, EmptyInputError
from partition_knn.topk.tracker import BoundedTopK

PartitionOutput = Union[PartitionResult, Sequence[LabeledCandidate]]


class GlobalMerger:
    """전역 top-K 병합 및 다수결 분류기."""

    def __init__(self, k_global: int) -> None:
        if k_global < 1:
            raise ConfigurationError(f"k_global은 1 이상이어야 합니다: k_global={k_global}")
        self._k_global = k_global

    @property
    def k_global(self) -> int:
        """투표에 사용하는 이웃 수를 반환한다."""
        return self._k_global

    def merge(self, partition_outputs: Iterable[PartitionOutput]) -> ClassificationResult:
        """모든 파티션 출력을 병합해 분류 결과를 반환한다."""
        results = _ordered_results(partition_outputs)
        tracker = BoundedTopK(self._k_global)
        for result in results:
            tracker.extend(result.candidates)

        if tracker.offered == 0:
            raise EmptyInputError(
                f"병합할 후보가 없습니다: partitions={len(results)}"
            )

        neighbors = tracker.snapshot()
        label, votes = majority_vote([neighbor.label for neighbor in neighbors])
        metrics = ClassificationMetrics(
            partition_count=len(results),
            scanned_records=sum(result.scanned for result in results),
            skipped_records=sum(result.skipped for result in results),
            candidate_count=tracker.offered,
        )
        return ClassificationResult(label=label, neighbors=neighbors, votes=votes, metrics=metrics)


def majority_vote(labels: Sequence[str]) -> tuple[str, dict[str, int]]:
    """레이블 빈도를 세고 최다 득표 레이블과 득표표를 반환한다.

    득표표는 레이블이 처음 등장한 순서를 유지하며, 동률이면 먼저 등장한 레이블을 선택한다.
    """
    if not labels:
        raise EmptyInputError("투표할 레이블이 없습니다")

    votes: dict[str, int] = {}
    for label in labels:
        votes[label] = votes.get(label, 0) + 1

    # max는 동률일 때 반복 순서상 첫 항목을 반환한다.
    winner = max(votes, key=votes.__getitem__)
    return winner, votes


def classify_label(partition_outputs: Iterable[PartitionOutput], k_global: int) -> str:
    """파티션 출력을 병합해 최종 레이블 문자열만 반환한다."""
    return GlobalMerger(k_global).merge(partition_outputs).label


def _ordered_results(partition_outputs: Iterable[PartitionOutput]) -> list[PartitionResult]:
    results: list[PartitionResult] = []
    for index, output in enumerate(partition_outputs):
        if isinstance(output, PartitionResult):
            results.append(output)
        else:
            results.append(PartitionResult(partition_id=index, candidates=tuple(output)))
    # sorted는 안정 정렬이므로 같은 partition_id는 전달된 순서를 유지한다.
    return sorted(results, key=lambda result: result.partition_id)
