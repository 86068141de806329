"""
Dashboards module data models.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.auth.models import Role


class DashboardView(str, Enum):
    """Which screen the client should render."""

    LOADING = "loading"
    SIGN_IN = "sign_in"
    PROFILE_SETUP_REQUIRED = "profile_setup_required"
    USER = "user"
    EMPLOYER = "employer"
    ADMIN = "admin"


class Panel(str, Enum):
    """Tabs available on a role dashboard."""

    SEARCH = "search"
    APPLICATIONS = "applications"
    SAVED = "saved"
    MESSAGES = "messages"
    PROFILE = "profile"
    JOBS = "jobs"
    APPLICANTS = "applicants"
    ANALYTICS = "analytics"
    USERS = "users"
    EMPLOYERS = "employers"


ROLE_PANELS: dict[Role, tuple[Panel, ...]] = {
    Role.USER: (Panel.SEARCH, Panel.APPLICATIONS, Panel.SAVED, Panel.MESSAGES, Panel.PROFILE),
    Role.EMPLOYER: (Panel.JOBS, Panel.APPLICANTS, Panel.MESSAGES, Panel.PROFILE),
    Role.ADMIN: (Panel.ANALYTICS, Panel.USERS, Panel.EMPLOYERS, Panel.JOBS),
}


class Dashboard(BaseModel):
    """What the client should show for the current session."""

    view: DashboardView
    role: Optional[Role] = None
    display_name: Optional[str] = None
    panels: list[Panel] = Field(default_factory=list)
    error: Optional[str] = None
