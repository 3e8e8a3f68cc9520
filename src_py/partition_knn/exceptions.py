"""
목적:
- partition_knn 계층의 예외 타입을 표준화한다.

설명:
- 레코드 파싱 오류, 설정 오류, 빈 입력 오류를 명시적으로 구분해
  호출자가 처리 전략(건너뛰기/즉시 중단)을 선택할 수 있게 한다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/partition_knn/worker/partition_worker.py
- src_py/partition_knn/merge/vote.py
- src_py/partition_knn/config/loader.py
"""


class PartitionKnnError(Exception):
    """partition_knn 공통 베이스 예외."""


class ParseError(PartitionKnnError):
    """단일 레코드의 필드가 누락되었거나 형식이 잘못되었을 때 발생한다."""


class ConfigurationError(PartitionKnnError):
    """파라미터 파일/스키마/K 값이 유효하지 않을 때 발생한다."""


class EmptyInputError(PartitionKnnError):
    """병합 단계에 후보가 하나도 전달되지 않았을 때 발생한다."""
