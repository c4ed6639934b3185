"""
Dashboard route exposing the derived view model.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date
from globebudget.db.session import get_db
from globebudget.models.user import User
from globebudget.schemas.dashboard import DashboardView
from globebudget.api.dependencies import get_current_user
from globebudget.services.dashboard_service import build_dashboard
from globebudget.services.snapshot_service import load_snapshot

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardView)
async def get_dashboard(
    include_wishlist: bool = False,
    today: Optional[date] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Compute balances, allowances, weekly split and recommendations."""
    snapshot = load_snapshot(current_user.id, db)
    return build_dashboard(snapshot, today or date.today(), include_wishlist=include_wishlist)
