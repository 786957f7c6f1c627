"""동적 필터 조각 모듈 — 목록 쿼리용 WHERE 조건 누적 및 결합.

Dynamic filter fragment module.
A FilterFragment is one parameterized predicate (a SQL template using
`:name` placeholders) plus its bound values. Builders turn a page request
into an ordered fragment list; `apply_filters` ANDs the list onto a
SELECT in insertion order.

User-supplied values only ever travel as bound parameters. Time windows
are computed here as datetime cut-offs and bound the same way.

Usage:
    fragments = build_pull_request_filters(options, now)
    query = apply_filters(select(PullRequest), fragments)
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Sequence
from urllib.parse import unquote

from sqlalchemy import ColumnElement, Select, and_, bindparam, text

from insights_api.schemas.pagination import PageOptions, PullRequestPageOptions, RepoFilterOptions


@dataclass(frozen=True)
class FilterFragment:
    """파라미터화된 WHERE 조건 조각.

    One predicate template plus its named parameters. Templates must not
    contain a top-level OR, since fragments are ANDed without extra grouping.

    Attributes:
        condition: `:name` 플레이스홀더를 쓰는 SQL 조건 (SQL predicate template)
        params: 플레이스홀더 이름 → 값 (Placeholder name to bound value)
    """

    condition: str
    params: dict[str, Any] = field(default_factory=dict)

    def to_clause(self) -> ColumnElement[bool]:
        """SQLAlchemy text 조건으로 변환합니다.

        Build the text clause. Parameters are bound as unique bindparams so
        the same placeholder name can appear in several fragments of one
        statement (e.g. both cohort windows) without colliding. List values
        become expanding IN parameters.
        """
        clause = text(self.condition)
        if self.params:
            clause = clause.bindparams(
                *[
                    bindparam(name, value, unique=True, expanding=isinstance(value, (list, tuple)))
                    for name, value in self.params.items()
                ]
            )
        return clause


def combine_filters(fragments: Sequence[FilterFragment]) -> ColumnElement[bool] | None:
    """조각 목록을 AND로 결합합니다. 빈 목록이면 None.

    AND-compose fragments in list order; None for an empty list.
    """
    if not fragments:
        return None
    return and_(*[fragment.to_clause() for fragment in fragments])


def apply_filters(query: Select, fragments: Sequence[FilterFragment]) -> Select:
    """조각 목록을 쿼리의 WHERE 절에 적용합니다.

    Apply fragments to a SELECT: the first becomes the WHERE clause and the
    rest are ANDed after it, in input order, so the generated SQL text is
    deterministic for a given fragment list.

    Args:
        query: 기본 SELECT 쿼리 (Base SELECT)
        fragments: 적용할 조각 목록 (Ordered fragments)

    Returns:
        Select: 조건이 적용된 쿼리 (Filtered SELECT)
    """
    criteria = combine_filters(fragments)
    if criteria is None:
        return query
    return query.where(criteria)


# ---------------------------------------------------------------------------
# 조각 빌더 — Fragment builders (pure: request + reference time -> fragments)
# ---------------------------------------------------------------------------

def range_start(now: datetime, days: int) -> datetime:
    """`now`로부터 `days`일 전 시각."""
    return now - timedelta(days=days)


def build_repo_filters(options: RepoFilterOptions) -> list[FilterFragment]:
    """저장소 이름/ID 필터 조각을 생성합니다.

    `repo` accepts one or more comma-separated full names, compared
    case-insensitively. `repo_ids` restricts to a repository id set.
    """
    filters: list[FilterFragment] = []

    if options.repo:
        repo_names = [name.strip().lower() for name in unquote(options.repo).split(",") if name.strip()]
        if repo_names:
            filters.append(FilterFragment("LOWER(repos.full_name) IN :repo_names", {"repo_names": repo_names}))

    if options.repo_ids:
        filters.append(FilterFragment("repos.id IN :repo_ids", {"repo_ids": list(options.repo_ids)}))

    return filters


def build_range_filter(options: PageOptions, now: datetime) -> FilterFragment:
    """최근 `range`일 활동 조건 (updated_at >= now - range)."""
    return FilterFragment(
        "pull_requests.updated_at >= :range_start",
        {"range_start": range_start(now, options.range)},
    )


def build_contributor_filter(contributor: str) -> FilterFragment:
    """작성자 로그인 조건 — URL 디코딩 후 대소문자 무시 비교.

    Decode first, then lowercase, then compare against the lowercased column.
    """
    return FilterFragment(
        "LOWER(pull_requests.author_login) = :contributor",
        {"contributor": unquote(contributor).lower()},
    )


def build_pull_request_filters(options: PullRequestPageOptions, now: datetime) -> list[FilterFragment]:
    """풀 리퀘스트 검색 조각 목록.

    Order: repo filters, range window, contributor, status.
    """
    filters = build_repo_filters(options)
    filters.append(build_range_filter(options, now))

    if options.contributor:
        filters.append(build_contributor_filter(options.contributor))

    if options.status:
        filters.append(
            FilterFragment("LOWER(pull_requests.state) = :status", {"status": options.status.lower()})
        )

    return filters


def build_contributor_filters(options: RepoFilterOptions, now: datetime) -> list[FilterFragment]:
    """기여자 검색 조각 목록 — 저장소 필터 + 기간."""
    filters = build_repo_filters(options)
    filters.append(build_range_filter(options, now))
    return filters


def _activity_window(
    repo_ids: Sequence[int],
    start: datetime,
    end: datetime,
) -> list[FilterFragment]:
    # [start, end) 구간, 빈 로그인 제외 — half-open window, ghost authors excluded
    return [
        FilterFragment("pull_requests.updated_at >= :window_start", {"window_start": start}),
        FilterFragment("pull_requests.updated_at < :window_end", {"window_end": end}),
        FilterFragment("pull_requests.author_login != ''"),
        FilterFragment("repos.id IN :repo_ids", {"repo_ids": list(repo_ids)}),
    ]


def build_cohort_filters(
    repo_ids: Sequence[int],
    days: int,
    now: datetime,
) -> tuple[list[FilterFragment], list[FilterFragment]]:
    """신규 기여자 분석용 두 구간의 조각 목록을 생성합니다.

    Build the fragment lists for the two adjacent windows of the cohort query:
    older = [now - 2*days, now - days), newer = [now - days, now).
    Both windows use `>=` on the lower bound and `<` on the upper bound.

    Returns:
        tuple: (이전 구간 조각, 최근 구간 조각) (older window, newer window)
    """
    older = _activity_window(repo_ids, range_start(now, days + days), range_start(now, days))
    newer = _activity_window(repo_ids, range_start(now, days), now)
    return older, newer
