"""풀 리퀘스트 SQLAlchemy ORM 모델 정의.

Pull request SQLAlchemy ORM model definition.

Tables:
    - pull_requests: GitHub 풀 리퀘스트 (GitHub pull requests, one row per PR)
"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from insights_api.database import Base


class PullRequest(Base):
    """풀 리퀘스트 모델.

    Pull request model. Only author_login, repo_id, state and updated_at
    take part in filtering; the remaining columns are returned as-is.

    Attributes:
        id: GitHub 풀 리퀘스트 ID (GitHub pull request id)
        number: 저장소 내 PR 번호 (Number within the repository)
        title: PR 제목 (Title)
        state: 상태 — "open"|"closed" (State)
        author_login: 작성자 GitHub 로그인 (Author login, may be empty for ghost users)
        repo_id: 소속 저장소 FK (Owning repository)
        draft: 드래프트 여부 (Draft flag)
        merged: 병합 여부 (Merged flag)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 최근 활동 일시 UTC (Last activity timestamp)
        closed_at: 종료 일시 UTC (Close timestamp, optional)
        merged_at: 병합 일시 UTC (Merge timestamp, optional)
    """

    __tablename__ = "pull_requests"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    state: Mapped[str] = mapped_column(String(20), nullable=False, default="open")
    # 작성자 로그인 — 탈퇴 사용자는 빈 문자열 (Empty string for deleted/ghost authors)
    author_login: Mapped[str] = mapped_column(String(255), nullable=False, default="", index=True)
    repo_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("repos.id", ondelete="CASCADE"), nullable=False, index=True)
    draft: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    merged: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)
    closed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    merged_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

