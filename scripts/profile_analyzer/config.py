#------------------------------------------------------------
#                          config.py
#     Centralizes API constants, environment lookups, and
#                  dashboard message templates.

import os
from typing import Optional

# Environment variable names for configuration
ENV_GITHUB_USERNAME = "GITHUB_USERNAME"
ENV_GITHUB_TOKEN = "GITHUB_TOKEN"
ENV_DASHBOARD_ROLE = "DASHBOARD_ROLE"
ENV_JOB_DESCRIPTION_PATH = "JOB_DESCRIPTION_PATH"
ENV_REPORT_PATH = "REPORT_PATH"

# Dashboard roles. None means the role chooser is showing.
ROLE_VISITOR = "visitor"
ROLE_RECRUITER = "recruiter"
VALID_ROLES = (ROLE_VISITOR, ROLE_RECRUITER)
DEFAULT_ROLE = ROLE_VISITOR

# Search lifecycle states
STATUS_IDLE = "idle"
STATUS_LOADING = "loading"
STATUS_LOADED = "loaded"
STATUS_ERRORED = "errored"

# Constants for GitHub API interaction
GITHUB_API_ACCEPT_HEADER = "application/vnd.github+json"
GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_RECENT_REPOS_LIMIT = 12
GITHUB_REQUEST_TIMEOUT_SECONDS = 30

# Scoring weights
REPO_WEIGHT = 2
FOLLOWER_WEIGHT = 1
YEAR_WEIGHT = 5
MIN_ACCOUNT_YEARS = 1
MAX_SCORE = 100
TOP_LANGUAGE_COUNT = 3

# Keyword matching
MIN_KEYWORD_LENGTH = 4
KEYWORDS_FOR_FULL_MATCH = 4

# Recent projects shown on the dashboard
RECENT_PROJECTS_SHOWN = 4

# Messages and templates for dashboard output.
APP_TITLE = "GitHub Analyzer PRO"
APP_SUBTITLE = "Precision analytics for the modern developer"
USER_NOT_FOUND_MESSAGE = "User not found!"
NO_OVERLAP_MESSAGE = "No overlap found"
FALLBACK_REPO_DESCRIPTION = "Consistent repository development."
LOADING_LABEL = "..."
ANALYZE_LABEL = "Analyze"
NO_GITHUB_USERNAME_MESSAGE = "No GITHUB_USERNAME found - nothing to analyze"
NO_GITHUB_TOKEN_MESSAGE = "No GITHUB_TOKEN found - using unauthenticated requests"
REPORT_SAVED_MESSAGE = "Report saved to {path}"

def _env(name: str) -> str:
    return os.environ.get(name, "").strip()

# This function does resolve the dashboard role from the environment.
# It falls back to the visitor role for blank or unknown values.
def resolve_role() -> str:
    configured = _env(ENV_DASHBOARD_ROLE).lower()
    if configured in VALID_ROLES:
        return configured
    return DEFAULT_ROLE

# This function does resolve an optional path from the environment.
# Relative paths are taken from the current working directory.
def resolve_path(env_name: str) -> Optional[str]:
    configured = _env(env_name)
    if not configured:
        return None
    return os.path.abspath(configured)

def resolve_username() -> str:
    return _env(ENV_GITHUB_USERNAME)

def resolve_token() -> str:
    return _env(ENV_GITHUB_TOKEN)
