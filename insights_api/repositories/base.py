"""기본 레포지토리 — 모든 레포지토리의 부모 클래스.

Base Repository — Parent class for all domain repositories.
Wraps query execution so a store failure surfaces as DataAccessError,
and exposes the shared count + row pagination.

Usage:
    class PullRequestRepository(BaseRepository[PullRequest]):
        def __init__(self) -> None:
            super().__init__(PullRequest)
"""

import logging
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Row, Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from insights_api.database import Base
from insights_api.schemas.pagination import PageOptions
from insights_api.utils.exceptions import DataAccessError
from insights_api.utils.pagination import paginate

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """제네릭 조회 레포지토리.

    Generic read repository.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        options: PageOptions,
    ) -> tuple[Sequence[Row[Any]], int]:
        """페이지네이션이 적용된 행 목록을 조회합니다.

        Retrieve one page of rows plus the total count of the filtered set.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            query: 필터/정렬이 적용된 SELECT 쿼리 (Filtered, ordered SELECT)
            options: 페이지 요청 (Page request)

        Returns:
            tuple[Sequence[Row], int]: (행 목록, 전체 개수) (Rows, total count)

        Raises:
            DataAccessError: 저장소 오류 (Store unavailable or statement rejected)
        """
        try:
            return await paginate(db, query, options)
        except SQLAlchemyError as exc:
            logger.error(
                "%s query failed: %s",
                self.model.__tablename__,
                exc.__class__.__name__,
                exc_info=exc,
            )
            raise DataAccessError() from exc
