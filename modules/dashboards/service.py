"""
Dashboard selection.

A pure mapping from a session snapshot to the screen the client renders.
"""

from modules.auth.models import Role, SessionSnapshot, SessionState

from .models import ROLE_PANELS, Dashboard, DashboardView

_ROLE_VIEWS = {
    Role.USER: DashboardView.USER,
    Role.EMPLOYER: DashboardView.EMPLOYER,
    Role.ADMIN: DashboardView.ADMIN,
}


def build_dashboard(snapshot: SessionSnapshot) -> Dashboard:
    """
    Pick the dashboard for a session snapshot.

    Loading wins over everything else so the client never flashes the
    wrong dashboard while a resolution is in flight. A signed-in identity
    without a role or without a visible profile row (not provisioned, or
    the lookup failed) gets the profile setup screen with the recorded
    error.
    """
    if snapshot.loading or snapshot.state in (
        SessionState.INITIALIZING,
        SessionState.RESOLVING,
    ):
        return Dashboard(view=DashboardView.LOADING)

    if snapshot.identity is None:
        return Dashboard(view=DashboardView.SIGN_IN, error=snapshot.error)

    if snapshot.role is None or snapshot.profile is None:
        return Dashboard(
            view=DashboardView.PROFILE_SETUP_REQUIRED,
            role=snapshot.role,
            error=snapshot.error,
        )

    return Dashboard(
        view=_ROLE_VIEWS[snapshot.role],
        role=snapshot.role,
        display_name=snapshot.profile.display_name,
        panels=list(ROLE_PANELS[snapshot.role]),
    )
