#------------------------------------------------------------
#                      markdown_view.py
#          Renders the role chooser, the dashboard, and
#               the printable report as markdown.

from datetime import datetime, timezone
from typing import List, Optional, Sequence
from dateutil import relativedelta
from ..config import (
    ANALYZE_LABEL,
    APP_SUBTITLE,
    APP_TITLE,
    FALLBACK_REPO_DESCRIPTION,
    LOADING_LABEL,
    NO_OVERLAP_MESSAGE,
    RECENT_PROJECTS_SHOWN,
    ROLE_RECRUITER,
    STATUS_LOADING,
)
from ..models import AnalysisResult, DashboardState, LanguageShare, MatchResult, Profile, RepositorySummary
from ..services.analysis_service import language_percentage

ROLE_MENU_TEMPLATE = (
    "# {title}\n"
    "_{subtitle}_\n\n"
    "1. **Visitor** - Explore technical profiles & repo stats\n"
    "2. **Recruiter** - Match candidates to internship roles"
)
NAVIGATION_TEMPLATE = "← Switch Role | GA **PRO** ({role})"
SEARCH_TEMPLATE = "Search: `{handle}` [{action}]"
ERROR_TEMPLATE = "> ⚠️ {error}"
PROFILE_HERO_TEMPLATE = (
    "## {display_name}\n"
    "![Avatar]({avatar_url})\n\n"
    "@{login} • Joined {joined_year}"
)
PROFILE_LINK_TEMPLATE = "[View on GitHub]({url})"
SCORE_TEMPLATE = "### Dev Score\n**{score}** / 100"
SKILL_RADAR_HEADING = "### Skill Radar"
SKILL_LINE_TEMPLATE = "- **{language}:** {percent}% {bar}"
NO_LANGUAGE_DATA_MESSAGE = "_No language data available yet._"
WORKSPACE_HEADING = "### Internship Matching Engine"
NO_MATCH_YET_MESSAGE = "_Paste requirements and run Match Profile._"
MATCH_TEMPLATE = "**Compatibility: {score:.0f}%**\nMatched: {skills}"
RECENT_PROJECTS_HEADING = "### Recent Projects"
NO_PROJECTS_MESSAGE = "_No repositories found._"
REPO_TITLE_TEMPLATE = "**{name}**"
REPO_LANGUAGE_TAG_TEMPLATE = " `{language}`"
REPO_UPDATED_TEMPLATE = "_Updated {when}_"
BAR_WIDTH = 20
BAR_FILL = "█"
BAR_EMPTY = "░"

def relative_time(moment: datetime, now: Optional[datetime] = None) -> str:
    """Return a human-friendly relative time string."""
    now = now or datetime.now(timezone.utc)
    delta = relativedelta.relativedelta(now, moment)
    if delta.years > 0:
        return f"{delta.years} year{'s' if delta.years != 1 else ''} ago"
    if delta.months > 0:
        return f"{delta.months} month{'s' if delta.months != 1 else ''} ago"
    if delta.days > 0:
        return f"{delta.days} day{'s' if delta.days != 1 else ''} ago"
    if delta.hours > 0:
        return f"{delta.hours} hour{'s' if delta.hours != 1 else ''} ago"
    return "just now"

def _render_bar(percent: int) -> str:
    filled = round(BAR_WIDTH * min(percent, 100) / 100)
    return BAR_FILL * filled + BAR_EMPTY * (BAR_WIDTH - filled)

def render_role_menu() -> str:
    return ROLE_MENU_TEMPLATE.format(title=APP_TITLE, subtitle=APP_SUBTITLE)

def render_navigation(role: str) -> str:
    return NAVIGATION_TEMPLATE.format(role=role)

# This function does render the search line for the current state.
# The action label turns into a loading marker while a search runs.
def render_search(state: DashboardState) -> str:
    action = LOADING_LABEL if state.status == STATUS_LOADING else ANALYZE_LABEL
    return SEARCH_TEMPLATE.format(handle=state.handle, action=action)

def render_error(error: str) -> str:
    return ERROR_TEMPLATE.format(error=error)

def render_profile_hero(profile: Profile) -> str:
    hero = PROFILE_HERO_TEMPLATE.format(
        display_name=profile.display_name,
        avatar_url=profile.avatar_url,
        login=profile.login,
        joined_year=profile.created_at.year,
    )
    if profile.html_url:
        hero += "\n" + PROFILE_LINK_TEMPLATE.format(url=profile.html_url)
    return hero

def render_score(analysis: AnalysisResult) -> str:
    return SCORE_TEMPLATE.format(score=analysis.score)

# This function does render the top language breakdown.
# Percentages are taken over every fetched repository.
def render_skill_radar(top_languages: Sequence[LanguageShare], total_repositories: int) -> str:
    lines = [SKILL_RADAR_HEADING]
    if not top_languages:
        lines.append(NO_LANGUAGE_DATA_MESSAGE)
        return "\n".join(lines)

    for language, count in top_languages:
        percent = language_percentage(count, total_repositories)
        lines.append(SKILL_LINE_TEMPLATE.format(language=language, percent=percent, bar=_render_bar(percent)))
    return "\n".join(lines)

def render_match_result(match_result: MatchResult) -> str:
    skills = ", ".join(match_result.skills) or NO_OVERLAP_MESSAGE
    return MATCH_TEMPLATE.format(score=match_result.score, skills=skills)

def render_recruiter_workspace(match_result: Optional[MatchResult]) -> str:
    body = render_match_result(match_result) if match_result else NO_MATCH_YET_MESSAGE
    return f"{WORKSPACE_HEADING}\n{body}"

# This function does render one repository block.
# It falls back to a stock description when the repo has none.
def render_repo_block(repo: RepositorySummary, now: Optional[datetime] = None) -> str:
    title = REPO_TITLE_TEMPLATE.format(name=repo.name)
    if repo.language:
        title += REPO_LANGUAGE_TAG_TEMPLATE.format(language=repo.language)
    block = f"{title}\n{repo.description or FALLBACK_REPO_DESCRIPTION}"
    if repo.updated_at:
        block += "\n" + REPO_UPDATED_TEMPLATE.format(when=relative_time(repo.updated_at, now))
    return block

def render_recent_projects(repositories: Sequence[RepositorySummary], now: Optional[datetime] = None) -> str:
    shown = list(repositories)[:RECENT_PROJECTS_SHOWN]
    if not shown:
        return f"{RECENT_PROJECTS_HEADING}\n{NO_PROJECTS_MESSAGE}"
    blocks = [render_repo_block(repo, now) for repo in shown]
    return RECENT_PROJECTS_HEADING + "\n\n" + "\n\n".join(blocks)

def _render_printable_sections(
    state: DashboardState,
    analysis: AnalysisResult,
    now: Optional[datetime],
    include_workspace: bool,
) -> List[str]:
    sections = [
        render_profile_hero(state.profile),
        render_score(analysis),
        render_skill_radar(analysis.top_languages, len(state.repositories)),
    ]
    if include_workspace:
        sections.append(render_recruiter_workspace(state.match_result))
    sections.append(render_recent_projects(state.repositories, now))
    return sections

# This function does render the full interactive dashboard.
# It shows the role chooser until a role has been selected.
def render_dashboard(
    state: DashboardState,
    analysis: Optional[AnalysisResult],
    now: Optional[datetime] = None,
) -> str:
    if not state.role:
        return render_role_menu()

    sections = [render_navigation(state.role), render_search(state)]
    if state.error:
        sections.append(render_error(state.error))
    if state.profile and analysis:
        sections.extend(
            _render_printable_sections(state, analysis, now, include_workspace=state.role == ROLE_RECRUITER)
        )
    return "\n\n".join(sections)

# This function does render the printable report.
# Navigation, search, and the recruiter workspace are left out.
def render_report(
    state: DashboardState,
    analysis: Optional[AnalysisResult],
    now: Optional[datetime] = None,
) -> str:
    if not state.profile or not analysis:
        return ""
    return "\n\n".join(_render_printable_sections(state, analysis, now, include_workspace=False))
