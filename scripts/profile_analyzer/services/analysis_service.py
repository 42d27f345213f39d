#------------------------------------------------------------
#                     analysis_service.py
#         Derives the developer score and the top
#              language distribution of a profile.

import math
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence
from ..config import (
    FOLLOWER_WEIGHT,
    MAX_SCORE,
    MIN_ACCOUNT_YEARS,
    REPO_WEIGHT,
    TOP_LANGUAGE_COUNT,
    YEAR_WEIGHT,
)
from ..models import AnalysisResult, LanguageShare, Profile, RepositorySummary

def _current_year() -> int:
    return datetime.now(timezone.utc).year

def clamp_score(value: float) -> float:
    return max(0, min(value, MAX_SCORE))

# This function does compute the account age in whole years.
# Accounts created this year (or with a future date) count as one year.
def compute_account_years(creation_year: int, current_year: Optional[int] = None) -> int:
    if current_year is None:
        current_year = _current_year()
    return max(MIN_ACCOUNT_YEARS, current_year - creation_year)

# This function does compute the bounded developer score.
# It weights repos, followers, and account age and caps at MAX_SCORE.
def compute_developer_score(
    public_repos: int,
    followers: int,
    creation_year: int,
    current_year: Optional[int] = None,
) -> int:
    years = compute_account_years(creation_year, current_year)
    raw_score = (public_repos * REPO_WEIGHT) + (followers * FOLLOWER_WEIGHT) + (years * YEAR_WEIGHT)
    return int(clamp_score(raw_score))

# This function does count primary languages across repositories.
# Insertion order follows the first repository each language appears in.
def count_languages(repositories: Sequence[RepositorySummary]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for repo in repositories:
        if not repo.language:
            continue
        counts[repo.language] = counts.get(repo.language, 0) + 1
    return counts

# This function does rank languages by repository count.
# sorted() is stable, so ties keep first-seen order.
def top_languages(repositories: Sequence[RepositorySummary], limit: int = TOP_LANGUAGE_COUNT) -> List[LanguageShare]:
    ranked = sorted(count_languages(repositories).items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]

def language_percentage(count: int, total_repositories: int) -> int:
    """Share of all fetched repositories, rounded half up.

    The denominator is every fetched repository, including those without a
    language tag. An empty repository list yields 0.
    """
    if total_repositories <= 0:
        return 0
    return int(math.floor((count / total_repositories) * 100 + 0.5))

# This function does derive the full analysis for a profile.
# It is recomputed from the current profile and repos on demand.
def analyze_profile(
    profile: Profile,
    repositories: Sequence[RepositorySummary],
    current_year: Optional[int] = None,
) -> AnalysisResult:
    creation_year = profile.created_at.year
    return AnalysisResult(
        score=compute_developer_score(profile.public_repos, profile.followers, creation_year, current_year),
        years=compute_account_years(creation_year, current_year),
        top_languages=top_languages(repositories),
    )
