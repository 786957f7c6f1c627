"""풀 리퀘스트 레포지토리.

Pull request repository — Composes the pull request, contributor and
new-contributor queries from filter fragments and paginates them.
"""

from typing import Any, Sequence

from sqlalchemy import Row, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import Subquery

from insights_api.models.pull_request import PullRequest
from insights_api.models.repo import Repo
from insights_api.repositories.base import BaseRepository
from insights_api.schemas.pagination import PageOptions, PullRequestFilterMode
from insights_api.utils.filters import FilterFragment, apply_filters


class PullRequestRepository(BaseRepository[PullRequest]):
    """풀 리퀘스트 레포지토리 — 목록, 기여자 집계, 신규 기여자 쿼리.

    Pull request queries: filtered listings, per-author aggregates and the
    new-contributor anti-join.
    """

    def __init__(self) -> None:
        super().__init__(PullRequest)

    def base_query(self) -> Select:
        """저장소 조인이 포함된 기본 쿼리.

        Pull requests joined to their owning repository, exposing the
        repository full name next to each entity.
        """
        return (
            select(PullRequest, Repo.full_name.label("full_name"))
            .join(Repo, PullRequest.repo_id == Repo.id)
        )

    async def find_pull_requests(
        self,
        db: AsyncSession,
        fragments: Sequence[FilterFragment],
        options: PageOptions,
        mode: PullRequestFilterMode | None = None,
    ) -> tuple[Sequence[Row[Any]], int]:
        """필터가 적용된 풀 리퀘스트 페이지를 조회합니다.

        Newest activity first. `mode` puts a repository-level sort key in
        front of that:

        - RECENT: the owning repository's updated_at, newest first.
        - MOST_ACTIVE: the owning repository's total pull request count,
          largest first.
        """
        query: Select = apply_filters(self.base_query(), fragments)

        if mode == PullRequestFilterMode.RECENT:
            query = query.order_by(Repo.updated_at.desc())
        elif mode == PullRequestFilterMode.MOST_ACTIVE:
            activity = self.repo_activity()
            query = query.join(activity, activity.c.repo_id == Repo.id).order_by(
                activity.c.pr_count.desc(), Repo.id
            )

        query = query.order_by(PullRequest.updated_at.desc(), PullRequest.id.desc())
        return await self.get_paginated(db, query, options)

    async def find_contributors(
        self,
        db: AsyncSession,
        fragments: Sequence[FilterFragment],
        options: PageOptions,
    ) -> tuple[Sequence[Row[Any]], int]:
        """작성자별 최근 활동 일시를 집계한 페이지를 조회합니다.

        One row per distinct author with MAX(updated_at), grouped rows
        rather than entities.
        """
        latest = func.max(PullRequest.updated_at).label("updated_at")
        query: Select = (
            select(PullRequest.author_login, latest)
            .join(Repo, PullRequest.repo_id == Repo.id)
            .group_by(PullRequest.author_login)
        )
        query = apply_filters(query, fragments)
        query = query.order_by(latest.desc(), PullRequest.author_login)
        return await self.get_paginated(db, query, options)

    def repo_activity(self) -> Subquery:
        """저장소별 풀 리퀘스트 수 서브쿼리 (repo_id, pr_count)."""
        return (
            select(
                PullRequest.repo_id.label("repo_id"),
                func.count(PullRequest.id).label("pr_count"),
            )
            .group_by(PullRequest.repo_id)
            .subquery("repo_activity")
        )

    def active_authors(self, fragments: Sequence[FilterFragment], name: str) -> Subquery:
        """구간 내 활동 작성자 서브쿼리 (author_login, 최근 updated_at)."""
        query: Select = (
            select(
                PullRequest.author_login.label("author_login"),
                func.max(PullRequest.updated_at).label("updated_at"),
            )
            .join(Repo, PullRequest.repo_id == Repo.id)
            .group_by(PullRequest.author_login)
        )
        return apply_filters(query, fragments).subquery(name)

    async def find_new_contributors(
        self,
        db: AsyncSession,
        older_window: Sequence[FilterFragment],
        newer_window: Sequence[FilterFragment],
        options: PageOptions,
    ) -> tuple[Sequence[Row[Any]], int]:
        """이전 구간에만 활동한 작성자 페이지를 조회합니다.

        Authors active in the older window and absent from the newer one:
        a left anti-join of the two window subqueries on author_login.
        """
        previous = self.active_authors(older_window, "previous_window")
        current = self.active_authors(newer_window, "current_window")

        query: Select = (
            select(previous.c.author_login, previous.c.updated_at)
            .outerjoin(current, previous.c.author_login == current.c.author_login)
            .where(current.c.author_login.is_(None))
            .order_by(previous.c.updated_at.desc(), previous.c.author_login)
        )
        return await self.get_paginated(db, query, options)


pull_request_repository: PullRequestRepository = PullRequestRepository()
