"""
목적:
- partition_knn Python 패키지의 공개 진입점을 제공한다.

설명:
- 라이브러리 핵심 클래스는 `PartitionWorker`, `GlobalMerger`, `KnnCoordinator` 세 가지다.
- 설정/계약 모델/예외/로컬 실행 유틸을 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/partition_knn/worker/partition_worker.py
- src_py/partition_knn/merge/vote.py
- src_py/partition_knn/orchestration/coordinator.py
"""

from .config.loader import QueryParameters, load_feature_schema, load_parameter_file
from .config.models import (
    FeatureSchema,
    FeatureSpec,
    ParameterSet,
    RunConfig,
    build_parameter_set,
    build_run_config,
    reference_schema,
)
from .contracts.candidate_models import (
    ClassificationMetrics,
    ClassificationResult,
    LabeledCandidate,
    PartitionResult,
)
from .contracts.feature_models import FeatureVector
from .exceptions import ConfigurationError, EmptyInputError, ParseError, PartitionKnnError
from .features.distance import squared_distance
from .features.normalizer import FeatureNormalizer
from .merge.vote import GlobalMerger, classify_label, majority_vote
from .orchestration.coordinator import KnnCoordinator
from .runtime.substrate import read_partitions, run_classification, write_label
from .topk.tracker import BoundedTopK
from .version import __version__
from .worker.partition_worker import PartitionWorker

__all__ = [
    "__version__",
    "PartitionWorker",
    "GlobalMerger",
    "KnnCoordinator",
    "FeatureNormalizer",
    "BoundedTopK",
    "squared_distance",
    "majority_vote",
    "classify_label",
    "FeatureSpec",
    "FeatureSchema",
    "ParameterSet",
    "RunConfig",
    "QueryParameters",
    "reference_schema",
    "build_parameter_set",
    "build_run_config",
    "load_parameter_file",
    "load_feature_schema",
    "FeatureVector",
    "LabeledCandidate",
    "PartitionResult",
    "ClassificationMetrics",
    "ClassificationResult",
    "read_partitions",
    "run_classification",
    "write_label",
    "PartitionKnnError",
    "ParseError",
    "ConfigurationError",
    "EmptyInputError",
]
