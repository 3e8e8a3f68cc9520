"""
목적:
- 파티션 워커 계층의 공개 진입점을 제공한다.

설명:
- 팬아웃 단계에서 파티션마다 호출되는 워커 클래스를 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/partition_knn/worker/partition_worker.py
"""

from .partition_worker import PartitionWorker

__all__ = ["PartitionWorker"]
