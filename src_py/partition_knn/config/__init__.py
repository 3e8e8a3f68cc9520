"""
목적:
- 설정 모델 계층의 공개 진입점을 제공한다.

설명:
- 라이브러리는 파일을 암묵적으로 읽지 않고, 외부에서 생성된 설정 객체를 주입받는다.
- 파일 로더는 드라이버 스크립트가 명시적으로 호출한다.

디자인 패턴:
- 설정 객체(Configuration Object).

참조:
- src_py/partition_knn/config/models.py
- src_py/partition_knn/config/loader.py
"""

from .loader import (
    QueryParameters,
    load_feature_schema,
    load_parameter_file,
    parse_parameter_text,
    require_query_width,
)
from .models import (
    FeatureSchema,
    FeatureSpec,
    ParameterSet,
    RunConfig,
    build_parameter_set,
    build_run_config,
    reference_schema,
)

__all__ = [
    "FeatureSpec",
    "FeatureSchema",
    "ParameterSet",
    "RunConfig",
    "QueryParameters",
    "reference_schema",
    "build_parameter_set",
    "build_run_config",
    "parse_parameter_text",
    "require_query_width",
    "load_parameter_file",
    "load_feature_schema",
]
