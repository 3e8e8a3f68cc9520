"""
목적:
- 로컬 실행용 파티션 공급/결과 기록 경계를 제공한다.

설명:
- 분산 실행 기반이 없는 환경에서 파일을 파티션으로 나누어 조정자에 전달한다.
- 입력 경로가 여러 개(또는 디렉터리)면 파일 하나가 파티션 하나이고,
  파일이 하나면 라인을 라운드 로빈으로 `partitions`개로 나눈다.
- 최종 레이블은 출력 파일(또는 표준 출력)에 한 번만 기록한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- scripts/run-classify.py
- src_py/partition_knn/orchestration/coordinator.py
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence, TextIO

from partition_knn.config.loader import load_feature_schema, load_parameter_file
from partition_knn.config.models import build_parameter_set, build_run_config, reference_schema
from partition_knn.contracts.candidate_models import ClassificationResult
from partition_knn.exceptions import ConfigurationError
from partition_knn.orchestration.coordinator import KnnCoordinator


def expand_input_paths(paths: Sequence[str | Path]) -> list[Path]:
    """입력 경로 목록을 파일 목록으로 펼친다. 디렉터리는 이름순 파일 목록이 된다."""
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            # 숨김 파일과 `_SUCCESS` 같은 작업 표식 파일은 제외한다.
            files.extend(
                sorted(
                    child
                    for child in path.iterdir()
                    if child.is_file() and not child.name.startswith((".", "_"))
                )
            )
        elif path.is_file():
            files.append(path)
        else:
            raise ConfigurationError(f"학습 데이터 경로가 존재하지 않습니다: {path}")

    if not files:
        raise ConfigurationError("학습 데이터 파일이 없습니다")
    return files


def split_round_robin(lines: Sequence[str], partitions: int) -> list[list[str]]:
    """라인 목록을 라운드 로빈으로 partitions개 파티션에 나눈다."""
    if partitions < 1:
        raise ConfigurationError(f"partitions는 1 이상이어야 합니다: partitions={partitions}")
    buckets: list[list[str]] = [[] for _ in range(partitions)]
    for index, line in enumerate(lines):
        buckets[index % partitions].append(line)
    return buckets


def read_partitions(paths: Sequence[str | Path], partitions: int = 1) -> list[list[str]]:
    """입력 파일을 읽어 파티션별 원시 레코드 목록을 만든다."""
    files = expand_input_paths(paths)
    contents = [_read_lines(path) for path in files]
    if len(contents) == 1:
        return split_round_robin(contents[0], partitions)
    return contents


async def run_classification(
    training_paths: Sequence[str | Path],
    parameter_path: str | Path,
    *,
    k_global: int | None = None,
    partitions: int = 1,
    schema_path: str | Path | None = None,
    worker_concurrency: int = 4,
) -> ClassificationResult:
    """파일 입력으로 전체 분류 흐름(설정 로드 -> 팬아웃 -> 팬인)을 실행한다.

    설정 오류는 파티션을 읽거나 워커를 시작하기 전에 ConfigurationError로 보고된다.
    """
    schema = reference_schema() if schema_path is None else load_feature_schema(schema_path)
    query_parameters = load_parameter_file(parameter_path, schema)
    parameters = build_parameter_set(
        k_local=query_parameters.k_local,
        k_global=k_global,
        feature_schema=schema,
    )
    config = build_run_config(parameters, worker_concurrency=worker_concurrency)
    coordinator = KnnCoordinator(config, query_parameters.query_fields)

    partition_records = read_partitions(training_paths, partitions=partitions)
    return await coordinator.classify(partition_records)


def write_label(result: ClassificationResult, output: str | Path | None = None) -> None:
    """최종 레이블을 출력 파일 또는 표준 출력에 기록한다."""
    if output is None:
        _write_to(sys.stdout, result.label)
        return

    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        _write_to(handle, result.label)


def format_neighbors(result: ClassificationResult) -> list[str]:
    """최종 이웃 목록을 `순위<TAB>거리<TAB>레이블` 문자열로 변환한다."""
    return [
        f"{rank}\t{neighbor.distance!r}\t{neighbor.label}"
        for rank, neighbor in enumerate(result.neighbors, start=1)
    ]


def _write_to(handle: TextIO, label: str) -> None:
    handle.write(f"{label}\n")


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise ConfigurationError(f"학습 데이터 파일을 읽을 수 없습니다: {path}: {exc}") from exc
