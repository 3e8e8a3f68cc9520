"""
목적:
- 유계 top-K 추적기 공개 심볼을 정의한다.

설명:
- 파티션 워커와 전역 병합 단계가 같은 추적기 구현을 공유한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/partition_knn/topk/tracker.py
"""

from .tracker import BoundedTopK

__all__ = ["BoundedTopK"]
