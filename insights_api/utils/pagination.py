"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the count + row executor and the page envelope returned by every
list endpoint: `{"data": [...], "meta": {...}}`.

The count and row queries run one after the other on the request's
session without snapshot isolation. Under concurrent writes the total may
count a row the page does not show (or the reverse); that is accepted.
"""

import math
from typing import Any, Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import Row, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from insights_api.schemas.pagination import PageOptions

T = TypeVar("T")


class PageMeta(BaseModel):
    """페이지 메타데이터 — camelCase로 직렬화.

    Page metadata, serialized with camelCase keys.

    Attributes:
        page: 현재 페이지 번호 (Current page, 1-based)
        limit: 페이지당 항목 수 (Items per page)
        item_count: 전체 항목 수 (Total count of the filtered set)
        page_count: 전체 페이지 수 (ceil(item_count / limit))
        has_previous_page: 이전 페이지 존재 여부 (page > 1)
        has_next_page: 다음 페이지 존재 여부 (page < page_count)
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    item_count: int
    page_count: int
    has_previous_page: bool
    has_next_page: bool


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과 모델 (Page envelope)."""

    data: list[T]
    meta: PageMeta


def build_page_meta(item_count: int, options: PageOptions) -> PageMeta:
    """전체 개수와 페이지 요청으로 메타데이터를 계산합니다."""
    page_count: int = math.ceil(item_count / options.limit)
    return PageMeta(
        page=options.page,
        limit=options.limit,
        item_count=item_count,
        page_count=page_count,
        has_previous_page=options.page > 1,
        has_next_page=options.page < page_count,
    )


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    options: PageOptions,
) -> tuple[Sequence[Row[Any]], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated query, returning the page's rows and the total count.
    The count wraps the filtered query (ordering stripped) in a subquery so
    it ignores limit/offset; the row query applies offset/limit to the
    ordered query.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: 필터와 정렬이 적용된 SELECT (Filtered, ordered SELECT)
        options: 페이지 요청 (Page request)

    Returns:
        tuple[Sequence[Row], int]: (행 목록, 전체 개수) (Rows, total count)
    """
    # 전체 개수 조회 — 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page rows with offset/limit)
    result = await db.execute(query.offset(options.skip).limit(options.limit))
    rows: Sequence[Row[Any]] = result.all()

    return rows, total
