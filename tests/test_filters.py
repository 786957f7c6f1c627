"""필터 조각 빌더 및 결합 테스트.

Filter fragment builder and AND-composition tests (no database).
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy import select

from insights_api.models import PullRequest
from insights_api.schemas.pagination import (
    PullRequestContributorOptions,
    PullRequestPageOptions,
)
from insights_api.utils.filters import (
    FilterFragment,
    apply_filters,
    build_cohort_filters,
    build_contributor_filters,
    build_pull_request_filters,
    build_repo_filters,
    combine_filters,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class TestRepoFilters:
    """저장소 필터 테스트."""

    def test_no_repo_fields(self):
        """저장소 필드가 없으면 조각 없음."""
        assert build_repo_filters(PullRequestContributorOptions()) == []

    def test_repo_names_lowercased_and_split(self):
        """저장소 이름은 소문자로, 쉼표로 분리."""
        options = PullRequestContributorOptions(repo="Open-Sauced/Insights, open-sauced/API")
        [fragment] = build_repo_filters(options)
        assert fragment.condition == "LOWER(repos.full_name) IN :repo_names"
        assert fragment.params == {"repo_names": ["open-sauced/insights", "open-sauced/api"]}

    def test_repo_ids(self):
        """저장소 ID 필터."""
        [fragment] = build_repo_filters(PullRequestContributorOptions(repo_ids=[1, 2]))
        assert fragment.condition == "repos.id IN :repo_ids"
        assert fragment.params == {"repo_ids": [1, 2]}


class TestPullRequestFilters:
    """풀 리퀘스트 검색 조각 테스트."""

    def test_only_range_when_no_optional_fields(self):
        """선택 필드가 없으면 기간 조건만 추가."""
        fragments = build_pull_request_filters(PullRequestPageOptions(range=30), NOW)
        assert len(fragments) == 1
        assert fragments[0].condition == "pull_requests.updated_at >= :range_start"
        assert fragments[0].params["range_start"] == NOW - timedelta(days=30)

    def test_one_fragment_per_present_field_in_order(self):
        """필드마다 조각 하나, 고정 순서."""
        options = PullRequestPageOptions(
            repo="open-sauced/insights",
            repo_ids=[1],
            contributor="octocat",
            status="open",
        )
        conditions = [f.condition for f in build_pull_request_filters(options, NOW)]
        assert conditions == [
            "LOWER(repos.full_name) IN :repo_names",
            "repos.id IN :repo_ids",
            "pull_requests.updated_at >= :range_start",
            "LOWER(pull_requests.author_login) = :contributor",
            "LOWER(pull_requests.state) = :status",
        ]

    def test_contributor_decoded_then_lowercased(self):
        """URL 인코딩된 작성자 이름은 디코딩 후 소문자 비교."""
        options = PullRequestPageOptions(contributor="Octo%2DCat")
        fragment = build_pull_request_filters(options, NOW)[-1]
        assert fragment.params == {"contributor": "octo-cat"}

    def test_status_lowercased(self):
        """상태 값은 소문자로 비교."""
        fragment = build_pull_request_filters(PullRequestPageOptions(status="OPEN"), NOW)[-1]
        assert fragment.params == {"status": "open"}

    def test_values_are_bound_not_interpolated(self):
        """사용자 입력은 SQL 문자열에 포함되지 않음."""
        options = PullRequestPageOptions(contributor="x' OR '1'='1")
        fragment = build_pull_request_filters(options, NOW)[-1]
        assert "'1'='1" not in fragment.condition
        assert fragment.params == {"contributor": "x' or '1'='1"}

    def test_contributor_filters_are_repo_plus_range(self):
        """기여자 검색은 저장소 필터 + 기간."""
        options = PullRequestContributorOptions(repo_ids=[3], range=7)
        conditions = [f.condition for f in build_contributor_filters(options, NOW)]
        assert conditions == ["repos.id IN :repo_ids", "pull_requests.updated_at >= :range_start"]


class TestCohortFilters:
    """신규 기여자 구간 조각 테스트."""

    def test_adjacent_half_open_windows(self):
        """이전 구간 [now-2r, now-r), 최근 구간 [now-r, now)."""
        older, newer = build_cohort_filters([1, 2], 30, NOW)

        assert older[0].condition == "pull_requests.updated_at >= :window_start"
        assert older[0].params["window_start"] == NOW - timedelta(days=60)
        assert older[1].condition == "pull_requests.updated_at < :window_end"
        assert older[1].params["window_end"] == NOW - timedelta(days=30)

        assert newer[0].params["window_start"] == NOW - timedelta(days=30)
        assert newer[1].params["window_end"] == NOW

    def test_windows_exclude_empty_login_and_scope_repos(self):
        """두 구간 모두 빈 로그인 제외 및 저장소 범위 적용."""
        for window in build_cohort_filters([7], 14, NOW):
            conditions = [f.condition for f in window]
            assert "pull_requests.author_login != ''" in conditions
            assert "repos.id IN :repo_ids" in conditions
            assert window[-1].params == {"repo_ids": [7]}


class TestComposition:
    """조각 결합 테스트."""

    def test_combine_empty_is_none(self):
        """빈 목록은 None."""
        assert combine_filters([]) is None

    def test_apply_empty_returns_query_unchanged(self):
        """조각이 없으면 쿼리 그대로."""
        query = select(PullRequest)
        assert apply_filters(query, []) is query

    def test_apply_preserves_order(self):
        """WHERE 절의 조건 순서는 입력 순서와 같음."""
        fragments = [
            FilterFragment("LOWER(pull_requests.state) = :status", {"status": "open"}),
            FilterFragment("LOWER(pull_requests.author_login) = :contributor", {"contributor": "octocat"}),
        ]
        where = str(apply_filters(select(PullRequest), fragments)).split("WHERE", 1)[1]
        assert where.index("LOWER(pull_requests.state)") < where.index("LOWER(pull_requests.author_login)")
        assert " AND " in where

        reversed_where = str(apply_filters(select(PullRequest), list(reversed(fragments)))).split("WHERE", 1)[1]
        assert reversed_where.index("LOWER(pull_requests.author_login)") < reversed_where.index("LOWER(pull_requests.state)")

    def test_apply_is_deterministic(self):
        """같은 조각 목록은 같은 SQL을 생성."""
        fragments = build_pull_request_filters(PullRequestPageOptions(contributor="octocat"), NOW)
        first = str(apply_filters(select(PullRequest), fragments))
        second = str(apply_filters(select(PullRequest), fragments))
        assert first == second
