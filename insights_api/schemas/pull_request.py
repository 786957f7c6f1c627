"""풀 리퀘스트 응답 스키마 정의.

Pull request and contributor response schemas (plain data-transfer objects).
Services map ORM rows into these; routers never return ORM objects.
"""

from datetime import datetime

from pydantic import BaseModel


class PullRequestResponse(BaseModel):
    """풀 리퀘스트 응답 스키마.

    Pull request response schema with the owning repository denormalized in.

    Attributes:
        id: GitHub PR ID (Pull request id)
        number: PR 번호 (Number within the repository)
        title: PR 제목 (Title)
        state: 상태 (State)
        author_login: 작성자 로그인 (Author login)
        repo_id: 저장소 ID (Owning repository id)
        full_name: 저장소 전체 이름 (Owning repository full name)
        draft: 드래프트 여부 (Draft flag)
        merged: 병합 여부 (Merged flag)
        created_at: 생성 일시 (Creation timestamp)
        updated_at: 최근 활동 일시 (Last activity timestamp)
        closed_at: 종료 일시 (Close timestamp)
        merged_at: 병합 일시 (Merge timestamp)
    """

    id: int
    number: int
    title: str
    state: str
    author_login: str
    repo_id: int
    full_name: str
    draft: bool = False
    merged: bool = False
    created_at: datetime
    updated_at: datetime
    closed_at: datetime | None = None
    merged_at: datetime | None = None


class PullRequestContributorResponse(BaseModel):
    """기여자 응답 스키마 — 로그인과 최근 활동 일시.

    Contributor row: author login and latest activity within the window.
    """

    author_login: str
    updated_at: datetime
