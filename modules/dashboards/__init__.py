"""
Dashboards module.

Chooses the role dashboard (or loading / sign-in / setup screen) for a
session snapshot.
"""

from .models import ROLE_PANELS, Dashboard, DashboardView, Panel
from .service import build_dashboard

__all__ = [
    "ROLE_PANELS",
    "Dashboard",
    "DashboardView",
    "Panel",
    "build_dashboard",
]
