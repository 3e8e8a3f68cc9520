"""
목적:
- 정규화된 특성 벡터 인터페이스 모델을 정의한다.

설명:
- 수치형 성분은 float64 1차원 numpy 배열, 명목형 성분은 문자열 튜플로 보관한다.
- 생성 이후 배열은 읽기 전용으로 고정되어 질의 벡터를 여러 워커가 공유해도 안전하다.
- 범위를 벗어난 입력은 클램핑하지 않으므로 성분이 [0, 1] 밖에 있을 수 있다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- src_py/partition_knn/features/normalizer.py
- src_py/partition_knn/features/distance.py
"""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator


class FeatureVector(BaseModel):
    """정규화된 특성 벡터 모델."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    numeric: np.ndarray
    nominal: tuple[str, ...] = Field(default=())

    @field_validator("numeric", mode="before")
    @classmethod
    def validate_numeric(cls, value: object) -> np.ndarray:
        numeric = np.array(value, dtype=np.float64, copy=True)
        if numeric.ndim != 1:
            raise ValueError("numeric must be a 1D numpy array")
        numeric.flags.writeable = False
        return numeric

    @property
    def width(self) -> int:
        """수치형과 명목형 성분을 합한 전체 차원 수를 반환한다."""
        return int(self.numeric.shape[0]) + len(self.nominal)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureVector):
            return NotImplemented
        return self.nominal == other.nominal and np.array_equal(self.numeric, other.numeric)

    __hash__ = None  # type: ignore[assignment]
