"""
목적:
- 프로젝트 기본 메타 설정을 제공한다.

설명:
- 드라이버 로그/진단 출력에서 공통으로 사용할 식별자 정보를 유지한다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- scripts/run-classify.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from partition_knn.version import __version__


class ProjectSettings(BaseModel):
    """partition_knn 기본 메타 설정 모델."""

    project_name: str = Field(default="Partition KNN")
    python_package: str = Field(default="partition_knn")
    version: str = Field(default=__version__)
    default_worker_concurrency: int = Field(default=4, ge=1)


def default_settings() -> ProjectSettings:
    """기본 설정 객체를 생성한다."""
    return ProjectSettings()
