"""기여자 라우터 — 기여자 검색 및 신규 기여자 분석.

Contributor Router — Contributor search and new-contributor insights.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from insights_api.api.deps import get_contributor_options
from insights_api.database import get_db
from insights_api.schemas.pagination import PullRequestContributorOptions
from insights_api.schemas.pull_request import PullRequestContributorResponse
from insights_api.services.pull_request_service import pull_request_service
from insights_api.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("/search", response_model=Page[PullRequestContributorResponse])
async def search_contributors(
    db: Annotated[AsyncSession, Depends(get_db)],
    options: Annotated[PullRequestContributorOptions, Depends(get_contributor_options)],
) -> Page[PullRequestContributorResponse]:
    """기간 내 활동한 기여자 목록을 조회합니다.

    Distinct pull request authors active within `range` days, latest first.
    """
    return await pull_request_service.find_all_contributors_with_filters(db, options)


@router.get("/insights/new", response_model=Page[PullRequestContributorResponse])
async def new_contributors(
    db: Annotated[AsyncSession, Depends(get_db)],
    options: Annotated[PullRequestContributorOptions, Depends(get_contributor_options)],
) -> Page[PullRequestContributorResponse]:
    """신규 기여자를 조회합니다. repoIds 필수.

    Authors active in the previous `range` window but not in the current one.
    """
    return await pull_request_service.find_new_contributors_in_time_range(db, options)
