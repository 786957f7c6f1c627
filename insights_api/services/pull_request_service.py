"""풀 리퀘스트 서비스 — 필터 구성, 행 매핑, 페이지 조립.

Pull request service — Builds filter fragments from page requests, runs
the repository queries, and maps rows into response DTOs.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Row
from sqlalchemy.ext.asyncio import AsyncSession

from insights_api.repositories.pull_request_repository import pull_request_repository
from insights_api.schemas.pagination import (
    PageOptions,
    PullRequestContributorOptions,
    PullRequestPageOptions,
)
from insights_api.schemas.pull_request import PullRequestContributorResponse, PullRequestResponse
from insights_api.utils.exceptions import MissingFilterError
from insights_api.utils.filters import (
    build_cohort_filters,
    build_contributor_filter,
    build_contributor_filters,
    build_pull_request_filters,
    build_range_filter,
)
from insights_api.utils.pagination import Page, build_page_meta


class PullRequestService:
    """풀 리퀘스트 비즈니스 로직.

    Pull request business logic. Every method reads "now" once and derives
    all time windows of its query from that single instant.
    """

    def _now(self) -> datetime:
        """현재 시각 (UTC). 요청마다 한 번만 읽습니다."""
        return datetime.now(timezone.utc)

    def _to_response(self, row: Row[Any]) -> PullRequestResponse:
        """(PullRequest, full_name) 행을 응답 DTO로 변환합니다."""
        pr = row[0]
        return PullRequestResponse(
            id=pr.id,
            number=pr.number,
            title=pr.title,
            state=pr.state,
            author_login=pr.author_login,
            repo_id=pr.repo_id,
            full_name=row.full_name,
            draft=pr.draft,
            merged=pr.merged,
            created_at=pr.created_at,
            updated_at=pr.updated_at,
            closed_at=pr.closed_at,
            merged_at=pr.merged_at,
        )

    def _to_contributor(self, row: Row[Any]) -> PullRequestContributorResponse:
        """(author_login, updated_at) 집계 행을 기여자 DTO로 변환합니다."""
        return PullRequestContributorResponse(
            author_login=row.author_login,
            updated_at=row.updated_at,
        )

    async def find_all(
        self,
        db: AsyncSession,
        options: PageOptions,
    ) -> Page[PullRequestResponse]:
        """전체 풀 리퀘스트 목록 — 최근 활동순.

        List every pull request, newest activity first, with no filters.
        """
        rows, total = await pull_request_repository.find_pull_requests(db, [], options)
        return Page[PullRequestResponse](
            data=[self._to_response(row) for row in rows],
            meta=build_page_meta(total, options),
        )

    async def find_all_by_contributor(
        self,
        db: AsyncSession,
        contributor: str,
        options: PageOptions,
    ) -> Page[PullRequestResponse]:
        """특정 작성자의 최근 `range`일 풀 리퀘스트 목록.

        Pull requests authored by `contributor` (case-insensitive, URL-decoded)
        updated within the last `range` days.
        """
        fragments = [
            build_contributor_filter(contributor),
            build_range_filter(options, self._now()),
        ]
        rows, total = await pull_request_repository.find_pull_requests(db, fragments, options)
        return Page[PullRequestResponse](
            data=[self._to_response(row) for row in rows],
            meta=build_page_meta(total, options),
        )

    async def find_all_with_filters(
        self,
        db: AsyncSession,
        options: PullRequestPageOptions,
    ) -> Page[PullRequestResponse]:
        """필터가 적용된 풀 리퀘스트 검색.

        Search pull requests by repo, repo ids, contributor, status and range.
        `filter=recent` orders by repository recency first, `filter=most-active`
        by the repository's pull request count first.

        Args:
            db: 비동기 DB 세션 (Async database session)
            options: 검색 요청 (Search request)

        Returns:
            Page[PullRequestResponse]: 페이지 응답 (Page envelope)
        """
        fragments = build_pull_request_filters(options, self._now())
        rows, total = await pull_request_repository.find_pull_requests(
            db,
            fragments,
            options,
            mode=options.filter,
        )
        return Page[PullRequestResponse](
            data=[self._to_response(row) for row in rows],
            meta=build_page_meta(total, options),
        )

    async def find_all_contributors_with_filters(
        self,
        db: AsyncSession,
        options: PullRequestContributorOptions,
    ) -> Page[PullRequestContributorResponse]:
        """기간 내 활동한 작성자 목록 (작성자별 최근 활동 일시)."""
        fragments = build_contributor_filters(options, self._now())
        rows, total = await pull_request_repository.find_contributors(db, fragments, options)
        return Page[PullRequestContributorResponse](
            data=[self._to_contributor(row) for row in rows],
            meta=build_page_meta(total, options),
        )

    async def find_new_contributors_in_time_range(
        self,
        db: AsyncSession,
        options: PullRequestContributorOptions,
    ) -> Page[PullRequestContributorResponse]:
        """신규 기여자 분석.

        Authors active in [now - 2*range, now - range) on the given
        repositories who have no activity in [now - range, now).

        Raises:
            MissingFilterError: repo_ids 누락 (repoIds absent or empty)
        """
        if not options.repo_ids:
            raise MissingFilterError("repoIds")

        older, newer = build_cohort_filters(options.repo_ids, options.range, self._now())
        rows, total = await pull_request_repository.find_new_contributors(db, older, newer, options)
        return Page[PullRequestContributorResponse](
            data=[self._to_contributor(row) for row in rows],
            meta=build_page_meta(total, options),
        )


pull_request_service: PullRequestService = PullRequestService()
