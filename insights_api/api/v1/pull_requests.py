"""풀 리퀘스트 라우터 — 목록 및 검색 엔드포인트.

Pull Request Router — Listing and filtered search endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from insights_api.api.deps import get_page_options, get_pull_request_options
from insights_api.database import get_db
from insights_api.schemas.pagination import PageOptions, PullRequestPageOptions
from insights_api.schemas.pull_request import PullRequestResponse
from insights_api.services.pull_request_service import pull_request_service
from insights_api.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("/list", response_model=Page[PullRequestResponse])
async def list_pull_requests(
    db: Annotated[AsyncSession, Depends(get_db)],
    options: Annotated[PageOptions, Depends(get_page_options)],
) -> Page[PullRequestResponse]:
    """전체 풀 리퀘스트 목록을 조회합니다 (최근 활동순).

    List all pull requests ordered by most recent activity.
    """
    return await pull_request_service.find_all(db, options)


@router.get("/search", response_model=Page[PullRequestResponse])
async def search_pull_requests(
    db: Annotated[AsyncSession, Depends(get_db)],
    options: Annotated[PullRequestPageOptions, Depends(get_pull_request_options)],
) -> Page[PullRequestResponse]:
    """필터로 풀 리퀘스트를 검색합니다.

    Search pull requests by repo, repoIds, contributor, status and range.
    """
    return await pull_request_service.find_all_with_filters(db, options)
