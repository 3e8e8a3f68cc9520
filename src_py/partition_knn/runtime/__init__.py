"""
목적:
- 로컬 실행 경계 계층의 공개 심볼을 정의한다.

설명:
- 파일 기반 파티션 공급과 결과 기록 유틸을 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/partition_knn/runtime/substrate.py
"""

from .substrate import (
    expand_input_paths,
    format_neighbors,
    read_partitions,
    run_classification,
    split_round_robin,
    write_label,
)

__all__ = [
    "expand_input_paths",
    "split_round_robin",
    "read_partitions",
    "run_classification",
    "write_label",
    "format_neighbors",
]
