"""v1 API 라우터 패키지 — 모든 v1 엔드포인트 통합.

v1 API Router package — Aggregates all v1 endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - pull_requests: 풀 리퀘스트 목록/검색 (Pull request listing and search)
    - contributors: 기여자 검색/신규 기여자 (Contributor search and cohort insights)
    - users: 사용자별 풀 리퀘스트 (Per-user pull requests)
"""

from fastapi import APIRouter

from insights_api.api.v1.pull_requests import router as pull_requests_router
from insights_api.api.v1.contributors import router as contributors_router
from insights_api.api.v1.users import router as users_router

v1_router: APIRouter = APIRouter()

v1_router.include_router(pull_requests_router, prefix="/prs", tags=["Pull Requests"])
v1_router.include_router(contributors_router, prefix="/contributors", tags=["Contributors"])
v1_router.include_router(users_router, prefix="/users", tags=["Users"])
