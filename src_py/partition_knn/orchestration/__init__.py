"""
목적:
- 분류 오케스트레이션 계층의 공개 심볼을 정의한다.

설명:
- 팬아웃/팬인 경계 클래스를 외부에 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/partition_knn/orchestration/coordinator.py
"""

from .coordinator import KnnCoordinator

__all__ = ["KnnCoordinator"]
