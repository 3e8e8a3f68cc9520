"""
목적:
- 파티션 후보/병합 결과 인터페이스 모델을 정의한다.

설명:
- LabeledCandidate는 워커가 생성한 뒤 변경되지 않는 (거리, 레이블) 쌍이다.
- PartitionResult는 파티션 하나의 최종 후보 집합과 스캔 통계를 담아 병합 단계로 전달된다.
- ClassificationResult는 최종 레이블, 최종 이웃 목록, 득표 수, 실행 메트릭을 담는다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/partition_knn/worker/partition_worker.py
- src_py/partition_knn/merge/vote.py
- src_py/partition_knn/orchestration/coordinator.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LabeledCandidate(BaseModel):
    """최근접 후보 (제곱 거리, 레이블) 모델."""

    model_config = ConfigDict(frozen=True)

    distance: float = Field(ge=0.0)
    label: str = Field(min_length=1)


class PartitionResult(BaseModel):
    """파티션 워커 실행 결과 모델."""

    model_config = ConfigDict(frozen=True)

    partition_id: int = Field(default=0, ge=0)
    candidates: tuple[LabeledCandidate, ...] = Field(default=())
    scanned: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)


class ClassificationMetrics(BaseModel):
    """분류 실행 메트릭 모델."""

    model_config = ConfigDict(frozen=True)

    partition_count: int = Field(ge=0)
    scanned_records: int = Field(ge=0)
    skipped_records: int = Field(ge=0)
    candidate_count: int = Field(ge=0)
    elapsed_ms: int = Field(default=0, ge=0)


class ClassificationResult(BaseModel):
    """최종 분류 결과 모델."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1)
    neighbors: list[LabeledCandidate] = Field(default_factory=list)
    votes: dict[str, int] = Field(default_factory=dict)
    metrics: ClassificationMetrics
