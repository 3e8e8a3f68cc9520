"""
목적:
- Python 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 특성 벡터/후보/분류 결과 모델을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/partition_knn/contracts/feature_models.py
- src_py/partition_knn/contracts/candidate_models.py
"""

from .candidate_models import (
    ClassificationMetrics,
    ClassificationResult,
    LabeledCandidate,
    PartitionResult,
)
from .feature_models import FeatureVector

__all__ = [
    "FeatureVector",
    "LabeledCandidate",
    "PartitionResult",
    "ClassificationMetrics",
    "ClassificationResult",
]
