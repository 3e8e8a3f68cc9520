"""
목적:
- 학습 데이터 파일과 파라미터 파일로 분산 KNN 분류를 실행하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 파일을 직접 읽지 않는다. 이 스크립트가 경로를 받아 로컬 실행 유틸에 주입한다.
- 입력 -> 파티션 워커 팬아웃 -> 전역 병합/투표 -> 레이블 기록 흐름을 실행한다.
- 성공 시 종료 코드 0, 실패 시 1을 반환한다.

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/partition_knn/runtime/substrate.py
- src_py/partition_knn/orchestration/coordinator.py
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from partition_knn import run_classification, write_label
from partition_knn.runtime.substrate import format_neighbors
from partition_knn.shared import default_settings


def parse_args() -> argparse.Namespace:
    settings = default_settings()
    parser = argparse.ArgumentParser(description=f"{settings.project_name} 드라이버")
    parser.add_argument(
        "inputs",
        nargs="+",
        help="학습 데이터 파일 또는 디렉터리 (파일 하나가 파티션 하나)",
    )
    parser.add_argument("--params", required=True, help="`K,q1,...,qN` 형식의 파라미터 파일")
    parser.add_argument("--output", default=None, help="레이블 출력 파일 (기본: 표준 출력)")
    parser.add_argument("--k-global", type=int, default=None, help="투표 이웃 수 (기본: K_local)")
    parser.add_argument(
        "--partitions",
        type=int,
        default=1,
        help="입력 파일이 하나일 때 나눌 파티션 수",
    )
    parser.add_argument("--schema", default=None, help="FeatureSchema JSON 파일 (기본: 참조 스키마)")
    parser.add_argument(
        "--concurrency",
        type=int,
        default=settings.default_worker_concurrency,
        help="동시에 실행할 파티션 워커 수",
    )
    parser.add_argument(
        "--show-neighbors",
        action="store_true",
        help="최종 이웃 목록과 거리를 표준 오류로 출력",
    )
    parser.add_argument("--log-level", default="WARNING", help="로그 레벨 (예: INFO, DEBUG)")
    return parser.parse_args()


async def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result = await run_classification(
        args.inputs,
        args.params,
        k_global=args.k_global,
        partitions=args.partitions,
        schema_path=args.schema,
        worker_concurrency=args.concurrency,
    )

    if args.show_neighbors:
        for line in format_neighbors(result):
            print("[neighbor]", line, file=sys.stderr)
        print("[metrics]", result.metrics.model_dump_json(), file=sys.stderr)

    write_label(result, args.output)
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(asyncio.run(main()))
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
