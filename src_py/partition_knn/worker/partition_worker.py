"""
목적:
- 파티션 하나의 학습 레코드를 스캔해 K_local개 최근접 후보를 계산한다.

설명:
- 레코드마다 정규화 -> 거리 계산 -> 유계 top-K offer 순서로 처리한다.
- 파싱에 실패한 레코드는 경고 로그를 남기고 건너뛰며, 파티션 전체를 실패시키지 않는다.
- 공유 상태는 읽기 전용 질의 벡터뿐이므로 같은 파티션을 다시 실행해도 결과가 같다.

디자인 패턴:
- 순수 워커(Stateless Worker).

참조:
- src_py/partition_knn/features/normalizer.py
- src_py/partition_knn/features/distance.py
- src_py/partition_knn/topk/tracker.py
- src_py/partition_knn/orchestration/coordinator.py
"""

from __future__ import annotations

import logging
from typing import Iterable

from partition_knn.contracts.candidate_models import LabeledCandidate, PartitionResult
from partition_knn.contracts.feature_models import FeatureVector
from partition_knn.exceptions import ConfigurationError, ParseError
from partition_knn.features.distance import squared_distance
from partition_knn.features.normalizer import FeatureNormalizer
from partition_knn.topk.tracker import BoundedTopK

logger = logging.getLogger(__name__)


class PartitionWorker:
    """파티션 단위 로컬 top-K 계산 워커."""

    def __init__(self, normalizer: FeatureNormalizer, query: FeatureVector, k_local: int) -> None:
        if k_local < 1:
            raise ConfigurationError(f"k_local은 1 이상이어야 합니다: k_local={k_local}")
        self._normalizer = normalizer
        self._query = query
        self._k_local = k_local

    @property
    def k_local(self) -> int:
        """파티션별 후보 용량을 반환한다."""
        return self._k_local

    def run(self, records: Iterable[str], partition_id: int = 0) -> PartitionResult:
        """파티션 레코드를 스캔해 최대 K_local개의 후보를 반환한다."""
        tracker = BoundedTopK(self._k_local)
        scanned = 0
        skipped = 0

        for position, line in enumerate(records):
            scanned += 1
            try:
                vector, label = self._normalizer.normalize_record(line)
            except ParseError as exc:
                skipped += 1
                logger.warning(
                    "레코드를 건너뜁니다: partition=%d, position=%d, reason=%s",
                    partition_id,
                    position,
                    exc,
                )
                continue

            distance = squared_distance(vector, self._query)
            tracker.offer(LabeledCandidate(distance=distance, label=label))

        candidates = tracker.snapshot()
        logger.debug(
            "파티션 스캔 완료: partition=%d, scanned=%d, skipped=%d, kept=%d",
            partition_id,
            scanned,
            skipped,
            len(candidates),
        )
        return PartitionResult(
            partition_id=partition_id,
            candidates=tuple(candidates),
            scanned=scanned,
            skipped=skipped,
        )
