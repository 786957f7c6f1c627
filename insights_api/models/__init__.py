"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    repo: 저장소 (Repo)
    pull_request: 풀 리퀘스트 (PullRequest)
"""

from insights_api.models.repo import Repo
from insights_api.models.pull_request import PullRequest

__all__ = [
    "Repo",
    "PullRequest",
]
