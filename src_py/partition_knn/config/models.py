"""
목적:
- partition_knn 라이브러리의 설정 인터페이스를 정의한다.

설명:
- 특성별 정규화 범위(min/max), K_local/K_global, 워커 동시성 값을 불변 모델로 관리한다.
- K_local과 K_global은 서로 독립된 명시적 값이며, 실행 중 어느 쪽도 덮어쓰지 않는다.
- 기본 스키마는 유방암 진단 참조 데이터셋의 10개 특성 범위를 사용한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- scripts/run-classify.py
- src_py/partition_knn/config/loader.py
- src_py/partition_knn/features/normalizer.py
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from partition_knn.exceptions import ConfigurationError

FeatureKind = Literal["numeric", "nominal"]

_REFERENCE_CODE_BOUNDS = (61_634.0, 13_454_352.0)
_REFERENCE_ORDINAL_BOUNDS = (1.0, 10.0)
_REFERENCE_ORDINAL_FEATURES = (
    "clump",
    "cell_size",
    "cell_shape",
    "marginal",
    "single_cell_size",
    "bare_nuclei",
    "chromatin",
    "nucleoli",
    "mitosis",
)


class FeatureSpec(BaseModel):
    """단일 특성의 이름/종류/정규화 범위 모델."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    kind: FeatureKind = Field(default="numeric")
    minimum: float = Field(default=0.0)
    maximum: float = Field(default=1.0)

    @model_validator(mode="after")
    def validate_bounds(self) -> FeatureSpec:
        if self.kind == "numeric" and self.maximum <= self.minimum:
            raise ValueError(
                f"maximum은 minimum보다 커야 합니다: name={self.name}, "
                f"minimum={self.minimum}, maximum={self.maximum}"
            )
        return self


class FeatureSchema(BaseModel):
    """학습 레코드의 특성 순서와 범위를 정의하는 스키마 모델."""

    model_config = ConfigDict(frozen=True)

    features: tuple[FeatureSpec, ...] = Field(min_length=1)

    @field_validator("features")
    @classmethod
    def validate_unique_names(cls, value: tuple[FeatureSpec, ...]) -> tuple[FeatureSpec, ...]:
        seen: set[str] = set()
        for feature in value:
            if feature.name in seen:
                raise ValueError(f"특성 이름이 중복되었습니다: {feature.name}")
            seen.add(feature.name)
        return value

    @property
    def width(self) -> int:
        """특성 개수(N)를 반환한다."""
        return len(self.features)

    @property
    def numeric_features(self) -> tuple[FeatureSpec, ...]:
        """수치형 특성만 스키마 순서대로 반환한다."""
        return tuple(feature for feature in self.features if feature.kind == "numeric")

    @property
    def nominal_features(self) -> tuple[FeatureSpec, ...]:
        """명목형 특성만 스키마 순서대로 반환한다."""
        return tuple(feature for feature in self.features if feature.kind == "nominal")


class ParameterSet(BaseModel):
    """실행 단위 파라미터 모델(K_local, K_global, 특성 스키마)."""

    model_config = ConfigDict(frozen=True)

    k_local: int = Field(ge=1)
    k_global: int = Field(ge=1)
    feature_schema: FeatureSchema = Field(default_factory=lambda: reference_schema())

    @model_validator(mode="after")
    def validate_k_relation(self) -> ParameterSet:
        # 파티션별 후보가 K_global보다 적으면 전역 top-K가 누락될 수 있다.
        if self.k_global > self.k_local:
            raise ValueError(
                "k_global은 k_local 이하이어야 합니다: "
                f"k_local={self.k_local}, k_global={self.k_global}"
            )
        return self


class RunConfig(BaseModel):
    """분류 실행(팬아웃/팬인) 설정 모델."""

    model_config = ConfigDict(frozen=True)

    parameters: ParameterSet
    worker_concurrency: int = Field(default=4, ge=1)


def reference_schema() -> FeatureSchema:
    """참조 데이터셋(코드 번호 + 9개 서열 특성)의 기본 스키마를 생성한다."""
    code_min, code_max = _REFERENCE_CODE_BOUNDS
    ordinal_min, ordinal_max = _REFERENCE_ORDINAL_BOUNDS
    features = [FeatureSpec(name="code", minimum=code_min, maximum=code_max)]
    features.extend(
        FeatureSpec(name=name, minimum=ordinal_min, maximum=ordinal_max)
        for name in _REFERENCE_ORDINAL_FEATURES
    )
    return FeatureSchema(features=tuple(features))


def build_parameter_set(
    k_local: int,
    k_global: int | None = None,
    feature_schema: FeatureSchema | None = None,
) -> ParameterSet:
    """검증 오류를 ConfigurationError로 변환하며 ParameterSet을 생성한다.

    k_global을 생략하면 k_local과 같은 값을 사용한다.
    """
    try:
        return ParameterSet(
            k_local=k_local,
            k_global=k_local if k_global is None else k_global,
            feature_schema=feature_schema or reference_schema(),
        )
    except ValidationError as exc:
        raise ConfigurationError(f"파라미터 설정이 유효하지 않습니다: {exc}") from exc


def build_run_config(parameters: ParameterSet, worker_concurrency: int = 4) -> RunConfig:
    """검증 오류를 ConfigurationError로 변환하며 RunConfig를 생성한다."""
    try:
        return RunConfig(parameters=parameters, worker_concurrency=worker_concurrency)
    except ValidationError as exc:
        raise ConfigurationError(f"실행 설정이 유효하지 않습니다: {exc}") from exc
