"""
목적:
- 두 정규화 특성 벡터 간 비유사도(제곱 거리 합)를 계산한다.

설명:
- 수치형 성분은 차이의 제곱을 합산한다.
- 명목형 성분은 같으면 0, 다르면 1을 더한다(이미 0/1 값이므로 제곱하지 않는다).
- 제곱근은 취하지 않는다. 순위가 동일하게 유지되며 결과 값은 비트 단위로 고정된다.

디자인 패턴:
- 함수형 유틸 모듈(Function Utility Module).

참조:
- src_py/partition_knn/worker/partition_worker.py
"""

from __future__ import annotations

import numpy as np

from partition_knn.contracts.feature_models import FeatureVector


def squared_distance(a: FeatureVector, b: FeatureVector) -> float:
    """두 벡터의 제곱 거리 합을 반환한다."""
    if a.numeric.shape != b.numeric.shape or len(a.nominal) != len(b.nominal):
        raise ValueError(
            "벡터 차원이 일치하지 않습니다: "
            f"left=({a.numeric.shape[0]}, {len(a.nominal)}), "
            f"right=({b.numeric.shape[0]}, {len(b.nominal)})"
        )

    diff = a.numeric - b.numeric
    total = float(np.dot(diff, diff))
    total += float(sum(1 for left, right in zip(a.nominal, b.nominal) if left != right))
    return total
