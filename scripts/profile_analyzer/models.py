#------------------------------------------------------------
#                          models.py
#       Defines dataclasses shared by the fetcher, the
#             scoring engine, and the dashboard.

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple
from .config import (
    DEFAULT_ROLE,
    GITHUB_RECENT_REPOS_LIMIT,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
    STATUS_IDLE,
)

@dataclass(frozen=True)
class Profile:
    login: str
    name: Optional[str]
    avatar_url: str
    created_at: datetime
    public_repos: int
    followers: int
    html_url: str = ""
    repos_url: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.login

@dataclass(frozen=True)
class RepositorySummary:
    id: int
    name: str
    description: Optional[str] = None
    language: Optional[str] = None
    html_url: str = ""
    updated_at: Optional[datetime] = None

LanguageShare = Tuple[str, int]

@dataclass(frozen=True)
class AnalysisResult:
    score: int
    years: int
    top_languages: List[LanguageShare]

@dataclass(frozen=True)
class MatchResult:
    score: float
    skills: List[str]

@dataclass
class AnalyzerConfig:
    github_username: str
    github_token: str
    role: str = DEFAULT_ROLE
    job_description_path: Optional[str] = None
    report_path: Optional[str] = None
    repo_limit: int = GITHUB_RECENT_REPOS_LIMIT
    request_timeout: int = GITHUB_REQUEST_TIMEOUT_SECONDS

@dataclass(frozen=True)
class DashboardState:
    role: Optional[str] = None
    status: str = STATUS_IDLE
    handle: str = ""
    profile: Optional[Profile] = None
    repositories: Tuple[RepositorySummary, ...] = field(default_factory=tuple)
    error: Optional[str] = None
    job_description: str = ""
    match_result: Optional[MatchResult] = None
    request_id: int = 0
