#------------------------------------------------------------
#                     matching_service.py
#       Matches job description keywords against the
#              metadata of fetched repositories.

import re
from typing import List, Sequence
from ..config import KEYWORDS_FOR_FULL_MATCH, MAX_SCORE, MIN_KEYWORD_LENGTH
from ..models import MatchResult, RepositorySummary

KEYWORD_SPLIT_PATTERN = r"[ ,.]+"

# This function does split a job description into keywords.
# It lower-cases the text and drops tokens shorter than MIN_KEYWORD_LENGTH.
def tokenize_job_description(text: str) -> List[str]:
    tokens = re.split(KEYWORD_SPLIT_PATTERN, (text or "").lower())
    return [token for token in tokens if len(token) >= MIN_KEYWORD_LENGTH]

# This function does build the searchable text for one repository.
# Missing description or language contribute an empty string.
def build_repo_text(repo: RepositorySummary) -> str:
    return f"{repo.name} {repo.description or ''} {repo.language or ''}".lower()

def compute_match_score(matched_count: int) -> float:
    return min((matched_count / KEYWORDS_FOR_FULL_MATCH) * 100, MAX_SCORE)

# This function does match job keywords against repository metadata.
# Substring hits count, so partial words match too.
def match_job_description(job_description: str, repositories: Sequence[RepositorySummary]) -> MatchResult:
    keywords = tokenize_job_description(job_description)
    repo_texts = [build_repo_text(repo) for repo in repositories]

    found: List[str] = []
    for text in repo_texts:
        for keyword in keywords:
            if keyword in text and keyword not in found:
                found.append(keyword)

    return MatchResult(score=compute_match_score(len(found)), skills=found)
