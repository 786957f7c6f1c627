"""저장소 SQLAlchemy ORM 모델 정의.

Repository SQLAlchemy ORM model definition.

Tables:
    - repos: GitHub 저장소 (Tracked GitHub repositories)
"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from insights_api.database import Base


class Repo(Base):
    """저장소 모델 — 풀 리퀘스트가 속한 GitHub 저장소.

    Repo model — GitHub repository owning pull requests.
    The primary key is the GitHub repository id, not a generated value.

    Attributes:
        id: GitHub 저장소 ID (GitHub repository id)
        full_name: "owner/name" 형식 전체 이름 (Full name in owner/name form)
        description: 저장소 설명 (Repository description, optional)
        stars: 스타 수 (Stargazer count)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 최근 활동 일시 UTC (Last activity timestamp, used by the "recent" sort)
    """

    __tablename__ = "repos"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    stars: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
