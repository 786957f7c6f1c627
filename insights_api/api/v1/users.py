"""사용자 라우터 — 사용자별 풀 리퀘스트.

User Router — Pull requests authored by one user.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from insights_api.api.deps import get_page_options
from insights_api.database import get_db
from insights_api.schemas.pagination import PageOptions
from insights_api.schemas.pull_request import PullRequestResponse
from insights_api.services.pull_request_service import pull_request_service
from insights_api.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("/{username}/prs", response_model=Page[PullRequestResponse])
async def list_user_pull_requests(
    username: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    options: Annotated[PageOptions, Depends(get_page_options)],
) -> Page[PullRequestResponse]:
    """사용자의 최근 풀 리퀘스트를 조회합니다 (대소문자 무시)."""
    return await pull_request_service.find_all_by_contributor(db, username, options)
