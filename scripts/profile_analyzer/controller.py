#------------------------------------------------------------
#                        controller.py
#        Owns the dashboard state and coordinates the
#           fetcher, scoring engine, and rendering.

import sys
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence
from .config import (
    ENV_JOB_DESCRIPTION_PATH,
    ENV_REPORT_PATH,
    NO_GITHUB_TOKEN_MESSAGE,
    NO_GITHUB_USERNAME_MESSAGE,
    REPORT_SAVED_MESSAGE,
    ROLE_RECRUITER,
    STATUS_ERRORED,
    STATUS_LOADED,
    STATUS_LOADING,
    VALID_ROLES,
    resolve_path,
    resolve_role,
    resolve_token,
    resolve_username,
)
from .exceptions import ProfileNotFound, RoleError
from .models import AnalysisResult, AnalyzerConfig, DashboardState, MatchResult, Profile, RepositorySummary
from .services.analysis_service import analyze_profile
from .services.github_service import GitHubService
from .services.job_description_service import load_job_description
from .services.matching_service import match_job_description
from .services.report_service import save_report
from .views.markdown_view import render_dashboard, render_report

STALE_RESPONSE_MESSAGE = "Ignoring stale response for request {request_id} (latest is {latest})"
EMPTY_REPORT_MESSAGE = "Nothing to report yet - search for a profile first"

class DashboardController:
    """Holds the single dashboard state record and applies transitions to it.

    The state is never mutated in place; each transition swaps in a new
    DashboardState. Search responses carry the request id they were issued
    with, and responses for anything but the latest request are dropped.
    """

    def __init__(self, github_service: GitHubService, current_year: Optional[int] = None):
        self.github_service = github_service
        self.current_year = current_year
        self.state = DashboardState()

    # This function does pick the dashboard role.
    # Only visitor and recruiter are accepted.
    def select_role(self, role: str) -> DashboardState:
        if role not in VALID_ROLES:
            raise ValueError(f"unknown role {role!r}; expected one of {', '.join(VALID_ROLES)}")
        self.state = replace(self.state, role=role)
        return self.state

    def switch_role(self) -> DashboardState:
        self.state = replace(self.state, role=None)
        return self.state

    # This function does start a new search for a handle.
    # It returns the request id, or None when the handle is blank.
    def begin_search(self, handle: str) -> Optional[int]:
        handle = (handle or "").strip()
        if not handle:
            return None

        request_id = self.state.request_id + 1
        self.state = replace(
            self.state,
            status=STATUS_LOADING,
            handle=handle,
            profile=None,
            repositories=(),
            error=None,
            match_result=None,
            request_id=request_id,
        )
        return request_id

    def _is_current(self, request_id: int) -> bool:
        if request_id != self.state.request_id:
            print(STALE_RESPONSE_MESSAGE.format(request_id=request_id, latest=self.state.request_id), file=sys.stderr)
            return False
        return True

    def complete_search(
        self,
        request_id: int,
        profile: Profile,
        repositories: Sequence[RepositorySummary],
    ) -> bool:
        if not self._is_current(request_id):
            return False
        self.state = replace(
            self.state,
            status=STATUS_LOADED,
            profile=profile,
            repositories=tuple(repositories),
            error=None,
        )
        return True

    def fail_search(self, request_id: int, message: str) -> bool:
        if not self._is_current(request_id):
            return False
        self.state = replace(
            self.state,
            status=STATUS_ERRORED,
            profile=None,
            repositories=(),
            error=message,
        )
        return True

    # This function does run a full search for a handle.
    # ProfileNotFound is turned into the errored state.
    def search(self, handle: str) -> DashboardState:
        request_id = self.begin_search(handle)
        if request_id is None:
            return self.state

        try:
            profile, repositories = self.github_service.fetch_profile(self.state.handle)
        except ProfileNotFound as exc:
            self.fail_search(request_id, exc.message)
            return self.state

        self.complete_search(request_id, profile, repositories)
        return self.state

    def analysis(self) -> Optional[AnalysisResult]:
        if self.state.profile is None:
            return None
        return analyze_profile(self.state.profile, self.state.repositories, self.current_year)

    # This function does run the recruiter keyword match.
    # It is only available in the recruiter workspace.
    def match_profile(self, job_description: str) -> MatchResult:
        if self.state.role != ROLE_RECRUITER:
            raise RoleError("Profile matching is only available to recruiters")

        match_result = match_job_description(job_description, self.state.repositories)
        self.state = replace(self.state, job_description=job_description, match_result=match_result)
        return match_result

    def render(self, now: Optional[datetime] = None) -> str:
        return render_dashboard(self.state, self.analysis(), now)

    # This function does write the printable report to disk.
    # It returns None when there is no loaded profile to report on.
    def generate_report(self, path: str, now: Optional[datetime] = None) -> Optional[str]:
        content = render_report(self.state, self.analysis(), now)
        if not content:
            print(EMPTY_REPORT_MESSAGE, file=sys.stderr)
            return None
        save_report(path, content)
        print(REPORT_SAVED_MESSAGE.format(path=path))
        return path

def load_config() -> AnalyzerConfig:
    return AnalyzerConfig(
        github_username=resolve_username(),
        github_token=resolve_token(),
        role=resolve_role(),
        job_description_path=resolve_path(ENV_JOB_DESCRIPTION_PATH),
        report_path=resolve_path(ENV_REPORT_PATH),
    )

# This function does execute the dashboard workflow end-to-end.
# It searches, matches for recruiters, prints, and writes the report.
def run_dashboard(config: Optional[AnalyzerConfig] = None) -> int:
    config = config or load_config()

    if not config.github_username:
        print(NO_GITHUB_USERNAME_MESSAGE, file=sys.stderr)
        return 1
    if not config.github_token:
        print(NO_GITHUB_TOKEN_MESSAGE)

    controller = DashboardController(GitHubService(config))
    controller.select_role(config.role)
    state = controller.search(config.github_username)

    if state.profile and config.role == ROLE_RECRUITER:
        job_description = load_job_description(config.job_description_path)
        if job_description.strip():
            controller.match_profile(job_description)

    print()
    print(controller.render())

    if state.error:
        return 1

    if config.report_path:
        controller.generate_report(config.report_path)
    return 0

def main() -> None:
    sys.exit(run_dashboard())
