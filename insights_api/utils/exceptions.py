"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses so services and
repositories can raise errors without specifying status codes at each
call site.

Usage:
    from insights_api.utils.exceptions import MissingFilterError
    raise MissingFilterError("repoIds")
"""

from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    Raised when request data is invalid beyond what Pydantic validation
    catches (e.g. a non-integer entry in `repoIds`).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class MissingFilterError(BadRequestError):
    """필수 필터 누락 예외.

    Raised before any query runs when a query path needs a filter the
    request did not supply (the cohort query needs `repoIds`).

    Args:
        filter_name: 누락된 필터 이름 (Name of the missing filter)
    """

    def __init__(self, filter_name: str) -> None:
        super().__init__(detail=f"missing required filter: {filter_name}")
        self.filter_name: str = filter_name


class DataAccessError(HTTPException):
    """503 Service Unavailable 예외 — 데이터 저장소 오류.

    Raised when the backing store fails (connection loss, malformed SQL).
    No retry is attempted.

    Args:
        detail: 오류 메시지 (Error message, default: "Data access failure")
    """

    def __init__(self, detail: str = "Data access failure") -> None:
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)
