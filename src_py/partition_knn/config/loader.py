"""
목적:
- 외부 파라미터 파일과 스키마 파일을 읽어 설정 객체로 변환한다.

설명:
- 파라미터 파일은 `K,q1,...,qN` 형식의 콤마 구분 텍스트이며, K는 K_local로 사용한다.
- 스키마 파일은 FeatureSchema 형식의 JSON 문서다.
- 모든 오류는 워커 실행 전에 ConfigurationError로 보고한다.

디자인 패턴:
- 설정 로더(Configuration Loader).

참조:
- scripts/run-classify.py
- src_py/partition_knn/config/models.py
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from partition_knn.config.models import FeatureSchema
from partition_knn.exceptions import ConfigurationError


class QueryParameters(BaseModel):
    """파라미터 파일에서 읽은 K_local과 원시 질의 필드 모델."""

    model_config = ConfigDict(frozen=True)

    k_local: int = Field(ge=1)
    query_fields: tuple[str, ...] = Field(min_length=1)


def require_query_width(query_fields: Sequence[str], schema: FeatureSchema) -> None:
    """질의 필드 개수가 스키마 폭과 정확히 같은지 검사한다.

    질의 폭 규칙은 이 함수 하나가 소유하며, 파라미터 파일 로더와 조정자가 함께 사용한다.
    """
    if len(query_fields) != schema.width:
        raise ConfigurationError(
            "질의 필드 개수가 스키마와 일치하지 않습니다: "
            f"expected={schema.width}, actual={len(query_fields)}"
        )


def parse_parameter_text(raw: str, schema: FeatureSchema) -> QueryParameters:
    """파라미터 파일 본문을 파싱한다."""
    tokens = [token.strip() for token in raw.split(",") if token.strip()]
    if not tokens:
        raise ConfigurationError("파라미터 파일이 비어 있습니다")

    try:
        k_local = int(tokens[0])
    except ValueError as exc:
        raise ConfigurationError(f"K 값을 정수로 해석할 수 없습니다: {tokens[0]!r}") from exc

    if k_local < 1:
        raise ConfigurationError(f"K는 1 이상이어야 합니다: k={k_local}")

    query_fields = tuple(tokens[1:])
    require_query_width(query_fields, schema)

    return QueryParameters(k_local=k_local, query_fields=query_fields)


def load_parameter_file(path: str | Path, schema: FeatureSchema) -> QueryParameters:
    """파라미터 파일을 읽어 QueryParameters를 생성한다."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"파라미터 파일을 읽을 수 없습니다: {path}: {exc}") from exc
    return parse_parameter_text(raw, schema)


def load_feature_schema(path: str | Path) -> FeatureSchema:
    """JSON 스키마 파일을 읽어 FeatureSchema를 생성한다."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"스키마 파일을 읽을 수 없습니다: {path}: {exc}") from exc

    try:
        return FeatureSchema.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"스키마 파일 형식이 잘못되었습니다: {path}: {exc}") from exc
