"""
목적:
- 파티션 워커 팬아웃과 전역 병합 팬인을 조정한다.

설명:
- 질의 벡터와 파라미터는 워커 시작 전에 한 번만 생성하며 이후 변경하지 않는다.
- 파티션마다 `asyncio.to_thread`로 워커를 실행하고 세마포어로 동시 실행 수를 제한한다.
- 모든 파티션이 끝난 뒤 단일 코루틴에서 병합하므로 병합 추적기는 스레드 간에 공유되지 않는다.

디자인 패턴:
- 조정자(Coordinator) + 워커 풀(Worker Pool).

참조:
- src_py/partition_knn/worker/partition_worker.py
- src_py/partition_knn/merge/vote.py
- src_py/partition_knn/runtime/substrate.py
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Iterable, Sequence

from partition_knn.config.loader import require_query_width
from partition_knn.config.models import RunConfig
from partition_knn.contracts.candidate_models import ClassificationResult, PartitionResult
from partition_knn.contracts.feature_models import FeatureVector
from partition_knn.exceptions import ConfigurationError, ParseError
from partition_knn.features.normalizer import FeatureNormalizer
from partition_knn.merge.vote import GlobalMerger
from partition_knn.worker.partition_worker import PartitionWorker

logger = logging.getLogger(__name__)


class KnnCoordinator:
    """분산 KNN 분류 실행 조정 클래스."""

    def __init__(self, config: RunConfig, query_fields: Sequence[str]) -> None:
        parameters = config.parameters
        schema = parameters.feature_schema
        require_query_width(query_fields, schema)

        normalizer = FeatureNormalizer(schema)
        try:
            query = normalizer.normalize(query_fields)
        except ParseError as exc:
            raise ConfigurationError(f"질의 벡터를 정규화할 수 없습니다: {exc}") from exc

        self._config = config
        self._query = query
        self._worker = PartitionWorker(normalizer, query, parameters.k_local)
        self._merger = GlobalMerger(parameters.k_global)

    @property
    def config(self) -> RunConfig:
        """실행 설정 객체를 반환한다."""
        return self._config

    @property
    def query(self) -> FeatureVector:
        """모든 워커가 공유하는 읽기 전용 질의 벡터를 반환한다."""
        return self._query

    def run_partition(self, records: Iterable[str], partition_id: int = 0) -> PartitionResult:
        """파티션 하나를 동기적으로 실행한다."""
        return self._worker.run(records, partition_id=partition_id)

    async def classify(self, partitions: Sequence[Iterable[str]]) -> ClassificationResult:
        """모든 파티션을 병렬 실행한 뒤 병합해 분류 결과를 반환한다."""
        started = time.perf_counter()
        logger.info(
            "분류 시작: partitions=%d, k_local=%d, k_global=%d, concurrency=%d",
            len(partitions),
            self._config.parameters.k_local,
            self._config.parameters.k_global,
            self._config.worker_concurrency,
        )

        semaphore = asyncio.Semaphore(self._config.worker_concurrency)

        async def run_one(partition_id: int, records: Iterable[str]) -> PartitionResult:
            async with semaphore:
                return await asyncio.to_thread(self._worker.run, records, partition_id)

        outputs = await asyncio.gather(
            *(run_one(partition_id, records) for partition_id, records in enumerate(partitions))
        )

        result = self._merger.merge(outputs)
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        metrics = result.metrics.model_copy(update={"elapsed_ms": elapsed_ms})

        logger.info(
            "분류 완료: label=%s, scanned=%d, skipped=%d, candidates=%d, elapsed_ms=%d",
            result.label,
            metrics.scanned_records,
            metrics.skipped_records,
            metrics.candidate_count,
            elapsed_ms,
        )
        return result.model_copy(update={"metrics": metrics})

    def classify_sync(self, partitions: Sequence[Iterable[str]]) -> ClassificationResult:
        """이벤트 루프가 없는 호출자를 위한 동기 진입점."""
        return asyncio.run(self.classify(partitions))
