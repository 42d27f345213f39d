"""Tests for the developer score and the Skill Radar language distribution."""

from datetime import datetime, timezone

import pytest

from conftest import make_profile, make_repo
from profile_analyzer.services.analysis_service import (
    analyze_profile,
    compute_account_years,
    compute_developer_score,
    count_languages,
    language_percentage,
    top_languages,
)


class TestAccountYears:
    def test_years_between_creation_and_now(self):
        assert compute_account_years(2018, current_year=2024) == 6

    def test_same_year_counts_as_one(self):
        assert compute_account_years(2024, current_year=2024) == 1

    def test_future_creation_year_still_counts_as_one(self):
        assert compute_account_years(2026, current_year=2024) == 1

    def test_defaults_to_current_utc_year(self):
        this_year = datetime.now(timezone.utc).year
        assert compute_account_years(this_year - 3) == 3


class TestDeveloperScore:
    def test_score_is_clamped_at_one_hundred(self):
        # 10 repos, 50 followers, created 2018, now 2024: 20 + 50 + 30 = 100
        assert compute_developer_score(10, 50, 2018, current_year=2024) == 100
        assert compute_developer_score(500, 9000, 2008, current_year=2024) == 100

    def test_score_uses_weighted_sum_below_cap(self):
        # 2*3 + 4 + 5*2 = 20
        assert compute_developer_score(3, 4, 2022, current_year=2024) == 20

    def test_new_account_with_nothing_scores_five(self):
        assert compute_developer_score(0, 0, 2024, current_year=2024) == 5

    @pytest.mark.parametrize(
        "repos,followers,created",
        [(0, 0, 2024), (1, 2, 2020), (40, 0, 2010), (12, 999, 2015), (0, 17, 2023)],
    )
    def test_score_matches_formula_and_stays_in_range(self, repos, followers, created):
        years = max(1, 2024 - created)
        expected = min(2 * repos + followers + 5 * years, 100)

        score = compute_developer_score(repos, followers, created, current_year=2024)

        assert score == expected
        assert 0 <= score <= 100


class TestLanguageDistribution:
    def test_counts_skip_repos_without_language(self):
        repos = [make_repo(1, "a", "Python"), make_repo(2, "b"), make_repo(3, "c", "Python")]
        assert count_languages(repos) == {"Python": 2}

    def test_ties_keep_first_seen_order(self):
        repos = [
            make_repo(1, "a", "JavaScript"),
            make_repo(2, "b", "JavaScript"),
            make_repo(3, "c", "Python"),
            make_repo(4, "d", "Go"),
        ]
        assert top_languages(repos) == [("JavaScript", 2), ("Python", 1), ("Go", 1)]

    def test_at_most_three_languages(self):
        repos = [
            make_repo(1, "a", "Rust"),
            make_repo(2, "b", "Go"),
            make_repo(3, "c", "Go"),
            make_repo(4, "d", "C"),
            make_repo(5, "e", "Ruby"),
            make_repo(6, "f", "Ruby"),
            make_repo(7, "g", "Ruby"),
        ]
        result = top_languages(repos)

        assert result == [("Ruby", 3), ("Go", 2), ("Rust", 1)]

    def test_fewer_languages_than_limit(self):
        repos = [make_repo(1, "a", "Python"), make_repo(2, "b")]
        assert top_languages(repos) == [("Python", 1)]

    def test_empty_repository_list(self):
        assert top_languages([]) == []


class TestLanguagePercentage:
    def test_denominator_is_every_fetched_repository(self):
        # Two of four repos are JavaScript even though one repo has no language.
        assert language_percentage(2, 4) == 50
        assert language_percentage(1, 4) == 25

    def test_rounds_half_up(self):
        assert language_percentage(1, 8) == 13
        assert language_percentage(1, 3) == 33
        assert language_percentage(2, 3) == 67

    def test_empty_list_has_no_division_by_zero(self):
        assert language_percentage(0, 0) == 0


class TestAnalyzeProfile:
    def test_combines_score_years_and_languages(self, sample_repos):
        profile = make_profile(created_year=2018, public_repos=10, followers=50)

        result = analyze_profile(profile, sample_repos, current_year=2024)

        assert result.score == 100
        assert result.years == 6
        assert result.top_languages == [("JavaScript", 2), ("Python", 1), ("Go", 1)]

    def test_profile_without_repositories(self):
        profile = make_profile(created_year=2023, public_repos=0, followers=1)

        result = analyze_profile(profile, [], current_year=2024)

        assert result.score == 6
        assert result.years == 1
        assert result.top_languages == []
