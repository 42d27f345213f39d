"""
Test fixtures and utilities for profile analyzer tests
"""

from datetime import datetime, timezone

import pytest
import requests

from profile_analyzer.models import AnalyzerConfig, Profile, RepositorySummary


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self.invalid_json:
            raise requests.JSONDecodeError("Expecting value", "<html>", 0)
        return self.payload


class RecordingGet:
    """Replays queued responses for requests.get and records each call."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def __call__(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_profile(login="octocat", name="The Octocat", created_year=2018, public_repos=10, followers=50):
    return Profile(
        login=login,
        name=name,
        avatar_url=f"https://avatars.githubusercontent.com/{login}",
        created_at=datetime(created_year, 3, 14, tzinfo=timezone.utc),
        public_repos=public_repos,
        followers=followers,
        html_url=f"https://github.com/{login}",
        repos_url=f"https://api.github.com/users/{login}/repos",
    )


def make_repo(repo_id, name, language=None, description=None, updated_at=None):
    return RepositorySummary(
        id=repo_id,
        name=name,
        description=description,
        language=language,
        html_url=f"https://github.com/octocat/{name}",
        updated_at=updated_at,
    )


@pytest.fixture
def config():
    return AnalyzerConfig(github_username="octocat", github_token="")


@pytest.fixture
def user_payload():
    return {
        "login": "octocat",
        "name": "The Octocat",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231",
        "html_url": "https://github.com/octocat",
        "repos_url": "https://api.github.com/users/octocat/repos",
        "created_at": "2018-01-25T18:44:36Z",
        "public_repos": 10,
        "followers": 50,
    }


@pytest.fixture
def repos_payload():
    return [
        {
            "id": 1,
            "name": "react-dashboard",
            "description": "Admin panel built in React",
            "language": "JavaScript",
            "html_url": "https://github.com/octocat/react-dashboard",
            "updated_at": "2024-05-01T10:00:00Z",
        },
        {
            "id": 2,
            "name": "node-api",
            "description": None,
            "language": "JavaScript",
            "html_url": "https://github.com/octocat/node-api",
            "updated_at": "2024-04-01T10:00:00Z",
        },
        {
            "id": 3,
            "name": "scraper",
            "description": "Collects listings",
            "language": "Python",
            "html_url": "https://github.com/octocat/scraper",
            "updated_at": "2024-03-01T10:00:00Z",
        },
        {
            "id": 4,
            "name": "dotfiles",
            "description": None,
            "language": None,
            "html_url": "https://github.com/octocat/dotfiles",
            "updated_at": "2023-01-01T10:00:00Z",
        },
    ]


@pytest.fixture
def sample_profile():
    return make_profile()


@pytest.fixture
def sample_repos():
    return [
        make_repo(1, "react-dashboard", "JavaScript", "Admin panel built in React"),
        make_repo(2, "node-api", "JavaScript"),
        make_repo(3, "scraper", "Python", "Collects listings"),
        make_repo(4, "cli-tool", "Go", "Command line helper"),
    ]
