"""
목적:
- 패키지 버전 문자열을 단일 위치에서 관리한다.

설명:
- pyproject.toml의 버전과 동일하게 유지한다.

디자인 패턴:
- 상수 모듈(Constant Module).

참조:
- pyproject.toml
"""

__version__ = "0.1.0"
