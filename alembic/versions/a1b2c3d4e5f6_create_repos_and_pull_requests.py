"""create_repos_and_pull_requests

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

저장소(repos) 및 풀 리퀘스트(pull_requests) 테이블 생성.
목록/기여자 쿼리의 필터 컬럼에 인덱스 추가.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "repos",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("stars", sa.Integer(), server_default="0", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_repos_full_name", "repos", ["full_name"])

    op.create_table(
        "pull_requests",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column("number", sa.Integer(), nullable=False),
        sa.Column("title", sa.Text(), server_default="", nullable=False),
        sa.Column("state", sa.String(20), server_default="open", nullable=False),
        sa.Column("author_login", sa.String(255), server_default="", nullable=False),
        sa.Column("repo_id", sa.BigInteger(), sa.ForeignKey("repos.id", ondelete="CASCADE"), nullable=False),
        sa.Column("draft", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("merged", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("closed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("merged_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_pull_requests_author_login", "pull_requests", ["author_login"])
    op.create_index("ix_pull_requests_repo_id", "pull_requests", ["repo_id"])
    op.create_index("ix_pull_requests_updated_at", "pull_requests", ["updated_at"])


def downgrade() -> None:
    op.drop_index("ix_pull_requests_updated_at")
    op.drop_index("ix_pull_requests_repo_id")
    op.drop_index("ix_pull_requests_author_login")
    op.drop_table("pull_requests")
    op.drop_index("ix_repos_full_name")
    op.drop_table("repos")
