"""
Dashboard API endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_session
from modules.auth.session import SessionContext

from .models import Dashboard
from .service import build_dashboard

router = APIRouter()


@router.get("", response_model=Dashboard)
async def get_dashboard(session: SessionContext = Depends(get_session)) -> Dashboard:
    """The screen the client should render for the caller."""
    return build_dashboard(session.snapshot())
