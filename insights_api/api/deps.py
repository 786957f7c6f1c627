"""FastAPI 의존성 주입 모듈 — 페이지 요청 파라미터 바인딩.

FastAPI dependency injection module — Page request binding.
Maps query parameters onto the page request schemas. Bounds are enforced
here (422 on violation) so the query core only sees valid requests.

Query parameters:
    page: 페이지 번호 (1-based)
    limit: 페이지당 항목 수 (1..PAGE_LIMIT_MAX)
    range: 조회 기간(일) (1..MAX_RANGE_DAYS)
    repo: 저장소 이름, 쉼표 구분 (Comma-separated repository full names)
    repoIds: 저장소 ID, 쉼표 구분 (Comma-separated repository ids)
    contributor: 작성자 로그인 (Author login)
    status: PR 상태 (Pull request state)
    filter: 정렬 모드 (Sort mode)
"""

from typing import Annotated

from fastapi import Depends, Query

from insights_api.config import settings
from insights_api.schemas.pagination import (
    PageOptions,
    PullRequestContributorOptions,
    PullRequestFilterMode,
    PullRequestPageOptions,
)
from insights_api.utils.exceptions import BadRequestError

# 저장소 ID 허용 범위 (BIGINT 양수) — Accepted repository id range
REPO_ID_MIN: int = 1
REPO_ID_MAX: int = 2**63 - 1


def parse_repo_ids(raw: str | None) -> list[int] | None:
    """쉼표로 구분된 저장소 ID 문자열을 정수 목록으로 변환합니다.

    Parse "1,2,3" into [1, 2, 3]. Blank input yields None.

    Raises:
        BadRequestError: 정수가 아닌 항목 또는 BIGINT 범위 밖의 ID
            (Non-integer entry, or an id outside 1..2**63-1)
    """
    if raw is None or not raw.strip():
        return None
    try:
        repo_ids = [int(value) for value in raw.split(",") if value.strip()]
    except ValueError:
        raise BadRequestError("repoIds must be a comma-separated list of integers")

    for repo_id in repo_ids:
        if not REPO_ID_MIN <= repo_id <= REPO_ID_MAX:
            raise BadRequestError(f"repoIds entries must be between {REPO_ID_MIN} and {REPO_ID_MAX}")
    return repo_ids


async def get_page_options(
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=settings.PAGE_LIMIT_MAX)] = settings.DEFAULT_PAGE_LIMIT,
    range_days: Annotated[int, Query(alias="range", ge=1, le=settings.MAX_RANGE_DAYS)] = settings.DEFAULT_RANGE_DAYS,
) -> PageOptions:
    """기본 페이지 요청 (page, limit, range)."""
    return PageOptions(page=page, limit=limit, range=range_days)


async def get_pull_request_options(
    base: Annotated[PageOptions, Depends(get_page_options)],
    repo: Annotated[str | None, Query(description="저장소 이름 필터 (owner/name)")] = None,
    repo_ids: Annotated[str | None, Query(alias="repoIds", description="저장소 ID 필터 (1,2,3)")] = None,
    contributor: Annotated[str | None, Query(description="작성자 로그인 필터")] = None,
    status: Annotated[str | None, Query(description="PR 상태 필터")] = None,
    filter_mode: Annotated[PullRequestFilterMode | None, Query(alias="filter")] = None,
) -> PullRequestPageOptions:
    """풀 리퀘스트 검색 요청."""
    return PullRequestPageOptions(
        **base.model_dump(),
        repo=repo,
        repo_ids=parse_repo_ids(repo_ids),
        contributor=contributor,
        status=status,
        filter=filter_mode,
    )


async def get_contributor_options(
    base: Annotated[PageOptions, Depends(get_page_options)],
    repo: Annotated[str | None, Query(description="저장소 이름 필터 (owner/name)")] = None,
    repo_ids: Annotated[str | None, Query(alias="repoIds", description="저장소 ID 필터 (1,2,3)")] = None,
) -> PullRequestContributorOptions:
    """기여자 검색 / 신규 기여자 분석 요청."""
    return PullRequestContributorOptions(
        **base.model_dump(),
        repo=repo,
        repo_ids=parse_repo_ids(repo_ids),
    )
