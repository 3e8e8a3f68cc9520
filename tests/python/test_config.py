import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from partition_knn.config.loader import (
    load_feature_schema,
    load_parameter_file,
    parse_parameter_text,
    require_query_width,
)
from partition_knn.config.models import (
    FeatureSchema,
    FeatureSpec,
    ParameterSet,
    build_parameter_set,
    build_run_config,
    reference_schema,
)
from partition_knn.exceptions import ConfigurationError


def test_reference_schema_has_ten_numeric_features() -> None:
    schema = reference_schema()

    assert schema.width == 10
    assert schema.features[0].name == "code"
    assert (schema.features[0].minimum, schema.features[0].maximum) == (61634.0, 13454352.0)
    assert all((f.minimum, f.maximum) == (1.0, 10.0) for f in schema.features[1:])
    assert schema.nominal_features == ()


def test_feature_spec_rejects_inverted_bounds() -> None:
    with pytest.raises(ValidationError, match="maximum은 minimum보다 커야 합니다"):
        FeatureSpec(name="x", minimum=5.0, maximum=5.0)


def test_nominal_feature_spec_ignores_bounds() -> None:
    spec = FeatureSpec(name="status", kind="nominal", minimum=0.0, maximum=0.0)

    assert spec.kind == "nominal"


def test_feature_schema_rejects_duplicate_names() -> None:
    with pytest.raises(ValidationError, match="특성 이름이 중복되었습니다"):
        FeatureSchema(features=(FeatureSpec(name="x"), FeatureSpec(name="x")))


def test_parameter_set_keeps_k_values_independent() -> None:
    parameters = build_parameter_set(k_local=7, k_global=5)

    assert parameters.k_local == 7
    assert parameters.k_global == 5
    assert parameters.feature_schema == reference_schema()


def test_parameter_set_defaults_k_global_to_k_local() -> None:
    assert build_parameter_set(k_local=3).k_global == 3


def test_parameter_set_is_frozen() -> None:
    parameters = build_parameter_set(k_local=3)

    with pytest.raises(ValidationError):
        parameters.k_global = 1  # type: ignore[misc]


def test_parameter_set_rejects_k_global_above_k_local() -> None:
    with pytest.raises(ValidationError, match="k_global은 k_local 이하이어야 합니다"):
        ParameterSet(k_local=2, k_global=3)

    with pytest.raises(ConfigurationError, match="파라미터 설정이 유효하지 않습니다"):
        build_parameter_set(k_local=2, k_global=3)


@pytest.mark.parametrize("k_local", [0, -1])
def test_build_parameter_set_rejects_non_positive_k(k_local: int) -> None:
    with pytest.raises(ConfigurationError):
        build_parameter_set(k_local=k_local)


def test_build_run_config_rejects_zero_concurrency() -> None:
    with pytest.raises(ConfigurationError, match="실행 설정이 유효하지 않습니다"):
        build_run_config(build_parameter_set(k_local=3), worker_concurrency=0)


def test_parse_parameter_text_reads_k_and_query_fields() -> None:
    raw = "5, 1000025,5,1,1,1,2,1,3,1,1\n"

    parameters = parse_parameter_text(raw, reference_schema())

    assert parameters.k_local == 5
    assert parameters.query_fields == ("1000025", "5", "1", "1", "1", "2", "1", "3", "1", "1")


def test_parse_parameter_text_rejects_non_integer_k() -> None:
    with pytest.raises(ConfigurationError, match="K 값을 정수로 해석할 수 없습니다"):
        parse_parameter_text("five,1,2,3,4,5,6,7,8,9,10", reference_schema())


def test_parse_parameter_text_rejects_non_positive_k() -> None:
    with pytest.raises(ConfigurationError, match="K는 1 이상이어야 합니다"):
        parse_parameter_text("0,1,2,3,4,5,6,7,8,9,10", reference_schema())


def test_parse_parameter_text_rejects_field_count_mismatch() -> None:
    with pytest.raises(ConfigurationError, match="expected=10, actual=3"):
        parse_parameter_text("3,1,2,3", reference_schema())


def test_parse_parameter_text_rejects_empty_text() -> None:
    with pytest.raises(ConfigurationError, match="파라미터 파일이 비어 있습니다"):
        parse_parameter_text(" \n", reference_schema())


def test_load_parameter_file_reads_from_disk(tmp_path: Path) -> None:
    path = tmp_path / "params.txt"
    path.write_text("3,1000025,5,1,1,1,2,1,3,1,1", encoding="utf-8")

    assert load_parameter_file(path, reference_schema()).k_local == 3


def test_load_parameter_file_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="파라미터 파일을 읽을 수 없습니다"):
        load_parameter_file(tmp_path / "missing.txt", reference_schema())


def test_load_feature_schema_from_json(tmp_path: Path) -> None:
    path = tmp_path / "schema.json"
    path.write_text(
        json.dumps(
            {
                "features": [
                    {"name": "age", "minimum": 0, "maximum": 120},
                    {"name": "smoker", "kind": "nominal"},
                ]
            }
        ),
        encoding="utf-8",
    )

    schema = load_feature_schema(path)

    assert schema.width == 2
    assert [f.name for f in schema.numeric_features] == ["age"]
    assert [f.name for f in schema.nominal_features] == ["smoker"]


def test_load_feature_schema_rejects_invalid_document(tmp_path: Path) -> None:
    path = tmp_path / "schema.json"
    path.write_text(json.dumps({"features": []}), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="스키마 파일 형식이 잘못되었습니다"):
        load_feature_schema(path)


def test_require_query_width_accepts_exact_width_only() -> None:
    schema = reference_schema()

    require_query_width(["1"] * 10, schema)

    with pytest.raises(ConfigurationError, match="expected=10, actual=9"):
        require_query_width(["1"] * 9, schema)

    with pytest.raises(ConfigurationError, match="expected=10, actual=11"):
        require_query_width(["1"] * 11, schema)
