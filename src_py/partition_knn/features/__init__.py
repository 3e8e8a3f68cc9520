"""
목적:
- 특성 정규화/거리 계산 계층의 공개 심볼을 정의한다.

설명:
- 워커가 레코드마다 호출하는 순수 함수 경로를 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/partition_knn/features/normalizer.py
- src_py/partition_knn/features/distance.py
"""

from .distance import squared_distance
from .normalizer import FeatureNormalizer

__all__ = ["FeatureNormalizer", "squared_distance"]
