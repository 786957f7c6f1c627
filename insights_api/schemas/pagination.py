"""페이지 요청 스키마 정의.

Page request schemas shared by every list endpoint.
Field bounds mirror the query-parameter validation in api.deps, so an
options object that reaches the service layer is already valid.
"""

from enum import Enum

from pydantic import BaseModel, Field

from insights_api.config import settings


class PageOptions(BaseModel):
    """기본 페이지 요청.

    Base page request.

    Attributes:
        page: 요청 페이지, 1부터 시작 (Requested page, 1-based)
        limit: 페이지당 항목 수 (Items per page)
        range: 조회 기간(일) (Activity window in days)
    """

    page: int = Field(1, ge=1)
    limit: int = Field(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.PAGE_LIMIT_MAX)
    range: int = Field(settings.DEFAULT_RANGE_DAYS, ge=1, le=settings.MAX_RANGE_DAYS)

    @property
    def skip(self) -> int:
        """OFFSET 값 — (page - 1) * limit."""
        return (self.page - 1) * self.limit


class PullRequestFilterMode(str, Enum):
    """정렬/필터 모드 (Sort mode for pull request listings)."""

    RECENT = "recent"
    MOST_ACTIVE = "most-active"


class RepoFilterOptions(PageOptions):
    """저장소 필터가 포함된 페이지 요청.

    Page request carrying the repository filters.

    Attributes:
        repo: "owner/name" 저장소 이름 (Repository full name)
        repo_ids: 저장소 ID 목록 (Repository id set, from comma-separated `repoIds`)
    """

    repo: str | None = None
    repo_ids: list[int] | None = None


class PullRequestPageOptions(RepoFilterOptions):
    """풀 리퀘스트 검색 요청.

    Pull request search request.

    Attributes:
        contributor: 작성자 로그인, URL 인코딩 허용 (Author login, may be URL-encoded)
        status: PR 상태 (State, case-insensitive)
        filter: 정렬 모드 (Sort mode)
    """

    contributor: str | None = None
    status: str | None = None
    filter: PullRequestFilterMode | None = None


class PullRequestContributorOptions(RepoFilterOptions):
    """기여자 검색 및 신규 기여자 분석 요청 (Contributor search / cohort request)."""

    pass
