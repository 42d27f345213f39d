#------------------------------------------------------------
#                      github_service.py
#          Handles GitHub user and repository lookups
#                  and response shaping.

import sys
from datetime import datetime
from typing import Dict, List, Optional, Tuple
import requests
from dateutil import parser as date_parser
from ..config import (
    GITHUB_API_ACCEPT_HEADER,
    GITHUB_API_BASE_URL,
    USER_NOT_FOUND_MESSAGE,
)
from ..exceptions import ProfileNotFound
from ..models import AnalyzerConfig, Profile, RepositorySummary

USER_ENDPOINT_TEMPLATE = "/users/{handle}"
USER_REPOS_ENDPOINT_TEMPLATE = "/users/{handle}/repos"
REPO_QUERY_TEMPLATE = "{base}?sort=updated&per_page={per_page}"

FETCH_USER_MESSAGE = "Fetching profile for {handle} …"
FETCH_REPOS_MESSAGE = "Fetching {per_page} most recently updated repos for {handle} …"
REPOS_RESULT_MESSAGE = "Found {count} repositories"
REPOS_FAILED_WARNING_TEMPLATE = "WARNING: repository lookup for {handle!r} failed ({reason}); showing no repositories"
REPOS_MALFORMED_WARNING_TEMPLATE = "WARNING: repository lookup for {handle!r} returned a malformed body; showing no repositories"
SKIPPED_REPO_WARNING_TEMPLATE = "WARNING: skipping malformed repository entry at position {index}"
MALFORMED_USER_MESSAGE = "Malformed user record for {handle!r}"

class GitHubService:

    # This function does initialize service state.
    # It stores runtime configuration used by API methods.
    def __init__(self, config: AnalyzerConfig):
        self.config = config

    # This function does build request headers for GitHub API calls.
    # It adds auth headers when a token is configured.
    def headers(self) -> Dict[str, str]:
        headers = {"Accept": GITHUB_API_ACCEPT_HEADER}
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    def _get(self, url: str) -> requests.Response:
        return requests.get(url, headers=self.headers(), timeout=self.config.request_timeout)

    # This function does fetch a profile and its recent repositories.
    # The user lookup runs first and the repo lookup depends on it.
    def fetch_profile(self, handle: str) -> Tuple[Profile, List[RepositorySummary]]:
        if not handle or not handle.strip():
            raise ValueError("handle must be a non-empty string")

        profile = self.fetch_user(handle.strip())
        repositories = self.fetch_recent_repos(profile)
        return profile, repositories

    # This function does fetch the user record for a handle.
    # Every failure is reported as ProfileNotFound.
    def fetch_user(self, handle: str) -> Profile:
        url = f"{GITHUB_API_BASE_URL}{USER_ENDPOINT_TEMPLATE.format(handle=_quote_handle(handle))}"
        print(FETCH_USER_MESSAGE.format(handle=handle))

        try:
            response = self._get(url)
        except requests.RequestException as exc:
            raise ProfileNotFound(handle, str(exc)) from exc

        if not response.ok:
            raise ProfileNotFound(handle, USER_NOT_FOUND_MESSAGE, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise ProfileNotFound(handle, MALFORMED_USER_MESSAGE.format(handle=handle)) from exc

        profile = parse_profile(data)
        if profile is None:
            raise ProfileNotFound(handle, MALFORMED_USER_MESSAGE.format(handle=handle))
        return profile

    # This function does fetch the most recently updated repositories.
    # Failures and malformed bodies degrade to an empty list with a warning.
    def fetch_recent_repos(self, profile: Profile) -> List[RepositorySummary]:
        base_url = profile.repos_url or (
            f"{GITHUB_API_BASE_URL}{USER_REPOS_ENDPOINT_TEMPLATE.format(handle=_quote_handle(profile.login))}"
        )
        url = REPO_QUERY_TEMPLATE.format(base=base_url, per_page=self.config.repo_limit)
        print(FETCH_REPOS_MESSAGE.format(per_page=self.config.repo_limit, handle=profile.login))

        try:
            response = self._get(url)
        except requests.RequestException as exc:
            print(REPOS_FAILED_WARNING_TEMPLATE.format(handle=profile.login, reason=exc), file=sys.stderr)
            return []

        if not response.ok:
            reason = f"HTTP {response.status_code}"
            print(REPOS_FAILED_WARNING_TEMPLATE.format(handle=profile.login, reason=reason), file=sys.stderr)
            return []

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, list):
            print(REPOS_MALFORMED_WARNING_TEMPLATE.format(handle=profile.login), file=sys.stderr)
            return []

        repositories: List[RepositorySummary] = []
        for index, item in enumerate(data[: self.config.repo_limit]):
            repository = parse_repository(item)
            if repository is None:
                print(SKIPPED_REPO_WARNING_TEMPLATE.format(index=index), file=sys.stderr)
                continue
            repositories.append(repository)

        print(REPOS_RESULT_MESSAGE.format(count=len(repositories)))
        return repositories

def _quote_handle(handle: str) -> str:
    return requests.utils.quote(handle, safe="")

def _parse_timestamp(value) -> Optional[datetime]:
    if not value or not isinstance(value, str):
        return None
    try:
        return date_parser.isoparse(value)
    except ValueError:
        return None

def _optional_text(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text else None

# This function does convert a user payload into a Profile.
# It returns None when required fields are missing.
def parse_profile(data) -> Optional[Profile]:
    if not isinstance(data, dict):
        return None

    login = data.get("login")
    created_at = _parse_timestamp(data.get("created_at"))
    if not login or created_at is None:
        return None

    try:
        public_repos = int(data.get("public_repos") or 0)
        followers = int(data.get("followers") or 0)
    except (TypeError, ValueError):
        return None

    return Profile(
        login=str(login),
        name=_optional_text(data.get("name")),
        avatar_url=data.get("avatar_url") or "",
        created_at=created_at,
        public_repos=public_repos,
        followers=followers,
        html_url=data.get("html_url") or "",
        repos_url=data.get("repos_url") or "",
    )

# This function does convert one repository payload entry.
# It returns None for entries without an id or a name.
def parse_repository(item) -> Optional[RepositorySummary]:
    if not isinstance(item, dict):
        return None
    repo_id = item.get("id")
    name = item.get("name")
    if repo_id is None or not name:
        return None

    return RepositorySummary(
        id=repo_id,
        name=str(name),
        description=_optional_text(item.get("description")),
        language=_optional_text(item.get("language")),
        html_url=item.get("html_url") or "",
        updated_at=_parse_timestamp(item.get("updated_at")),
    )
