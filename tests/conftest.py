"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh database (aiosqlite + StaticPool), so no cleanup
between tests is needed.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from insights_api.database import Base, get_db
from insights_api.main import app
from insights_api.models import PullRequest, Repo

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
def days_ago(days: float) -> datetime:
    """현재 시각 기준 `days`일 전 (UTC)."""
    return datetime.now(timezone.utc) - timedelta(days=days)


async def add_pull_request(
    db: AsyncSession,
    pr_id: int,
    repo_id: int,
    author_login: str,
    updated_days_ago: float,
    state: str = "open",
    updated_at: datetime | None = None,
) -> PullRequest:
    """풀 리퀘스트 한 건을 생성합니다.

    `updated_at`을 주면 `updated_days_ago` 대신 그 시각을 그대로 사용합니다.
    """
    if updated_at is None:
        updated_at = days_ago(updated_days_ago)
    pr = PullRequest(
        id=pr_id,
        number=pr_id,
        title=f"PR #{pr_id}",
        state=state,
        author_login=author_login,
        repo_id=repo_id,
        created_at=updated_at - timedelta(days=1),
        updated_at=updated_at,
    )
    db.add(pr)
    await db.flush()
    return pr


@pytest_asyncio.fixture
async def repos(db: AsyncSession) -> dict[int, Repo]:
    """테스트 저장소 3개를 생성합니다 (1, 2: open-sauced, 3: 다른 조직)."""
    result = {}
    for repo_id, full_name, updated in [
        (1, "open-sauced/insights", 2),
        (2, "open-sauced/api", 20),
        (3, "octo-org/hello-world", 1),
    ]:
        repo = Repo(id=repo_id, full_name=full_name, stars=repo_id * 10, updated_at=days_ago(updated))
        db.add(repo)
        result[repo_id] = repo
    await db.flush()
    return result


@pytest_asyncio.fixture
async def pull_requests(db: AsyncSession, repos) -> list[PullRequest]:
    """필터 테스트용 풀 리퀘스트 세트.

    repo 1: octocat(open, 1일), Octocat(closed, 3일), bdougie(open, 10일)
    repo 2: bdougie(closed, 5일), zeucapua(open, 45일)
    repo 3: octocat(open, 2일)
    """
    return [
        await add_pull_request(db, 101, 1, "octocat", 1),
        await add_pull_request(db, 102, 1, "Octocat", 3, state="closed"),
        await add_pull_request(db, 103, 1, "bdougie", 10),
        await add_pull_request(db, 201, 2, "bdougie", 5, state="closed"),
        await add_pull_request(db, 202, 2, "zeucapua", 45),
        await add_pull_request(db, 301, 3, "octocat", 2),
    ]
