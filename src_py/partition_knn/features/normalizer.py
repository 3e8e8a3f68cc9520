"""
목적:
- 원시 레코드 필드를 고정 길이 정규화 특성 벡터로 변환한다.

설명:
- 수치형 필드는 `(value - min) / (max - min)`로 선형 변환하며 클램핑하지 않는다.
- 명목형 필드는 변환 없이 원시 문자열로 유지하고 거리 계산 단계에서 일치 여부만 비교한다.
- 필드 누락/형식 오류는 레코드 단위 ParseError로 보고한다.

디자인 패턴:
- 순수 함수 변환기(Pure Transformer).

참조:
- src_py/partition_knn/config/models.py
- src_py/partition_knn/worker/partition_worker.py
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from partition_knn.config.models import FeatureSchema, FeatureSpec
from partition_knn.contracts.feature_models import FeatureVector
from partition_knn.exceptions import ParseError


class FeatureNormalizer:
    """스키마 기반 특성 정규화기."""

    def __init__(self, schema: FeatureSchema) -> None:
        self._schema = schema
        numeric = schema.numeric_features
        self._minimum = np.array([feature.minimum for feature in numeric], dtype=np.float64)
        self._span = np.array(
            [feature.maximum - feature.minimum for feature in numeric],
            dtype=np.float64,
        )

    @property
    def schema(self) -> FeatureSchema:
        """정규화에 사용하는 스키마를 반환한다."""
        return self._schema

    def normalize(self, raw_fields: Sequence[str]) -> FeatureVector:
        """원시 필드 시퀀스를 FeatureVector로 변환한다.

        Args:
            raw_fields: 스키마 순서의 원시 문자열 필드. 스키마 폭을 넘는 필드는 무시한다.

        Returns:
            수치형 성분이 정규화된 FeatureVector.

        Raises:
            ParseError: 필드 수가 부족하거나, 수치형 필드를 해석할 수 없거나,
                정규화 결과가 유한하지 않을 때.
        """
        width = self._schema.width
        if len(raw_fields) < width:
            raise ParseError(f"필드 수가 부족합니다: expected={width}, actual={len(raw_fields)}")

        numeric_values: list[float] = []
        nominal_values: list[str] = []
        for feature, raw in zip(self._schema.features, raw_fields):
            token = str(raw).strip()
            if feature.kind == "nominal":
                if not token:
                    raise ParseError(f"명목형 필드가 비어 있습니다: name={feature.name}")
                nominal_values.append(token)
            else:
                numeric_values.append(_parse_numeric(feature, token))

        raw_numeric = np.array(numeric_values, dtype=np.float64)
        with np.errstate(over="ignore", invalid="ignore"):
            numeric = (raw_numeric - self._minimum) / self._span

        # 유한한 입력도 좁은 범위로 나누면 inf가 될 수 있다.
        overflowed = np.flatnonzero(~np.isfinite(numeric))
        if overflowed.size:
            index = int(overflowed[0])
            feature = self._schema.numeric_features[index]
            raise ParseError(
                "정규화 결과가 유한하지 않습니다: "
                f"name={feature.name}, value={numeric_values[index]!r}"
            )

        return FeatureVector(numeric=numeric, nominal=tuple(nominal_values))

    def split_record(self, line: str) -> tuple[list[str], str]:
        """학습 레코드 한 줄을 특성 필드와 마지막 레이블 필드로 분리한다."""
        tokens = [token.strip() for token in line.split(",")]
        expected = self._schema.width + 1
        if len(tokens) != expected:
            raise ParseError(f"레코드 필드 수가 잘못되었습니다: expected={expected}, actual={len(tokens)}")
        if not tokens[-1]:
            raise ParseError("레이블 필드가 비어 있습니다")
        return tokens[:-1], tokens[-1]

    def normalize_record(self, line: str) -> tuple[FeatureVector, str]:
        """학습 레코드 한 줄을 (정규화 벡터, 레이블)로 변환한다."""
        fields, label = self.split_record(line)
        return self.normalize(fields), label


def _parse_numeric(feature: FeatureSpec, token: str) -> float:
    try:
        value = float(token)
    except ValueError as exc:
        raise ParseError(f"수치형 필드를 해석할 수 없습니다: name={feature.name}, value={token!r}") from exc
    if not math.isfinite(value):
        raise ParseError(f"수치형 필드가 유한하지 않습니다: name={feature.name}, value={token!r}")
    return value
