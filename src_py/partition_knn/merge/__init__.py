"""
목적:
- 전역 병합/투표 계층의 공개 심볼을 정의한다.

설명:
- 팬인 단계에서 한 번 호출되는 병합기와 투표 함수를 외부에 노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/partition_knn/merge/vote.py
"""

from .vote import GlobalMerger, PartitionOutput, classify_label, majority_vote

__all__ = ["GlobalMerger", "PartitionOutput", "classify_label", "majority_vote"]
