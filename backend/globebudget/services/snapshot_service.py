"""
Snapshot loader: reads one user's entities and converts them to engine records.
"""
from sqlalchemy.orm import Session, selectinload
from typing import Optional
from globebudget.models.budget import Budget as BudgetRow, BudgetMode
from globebudget.models.expense import Expense
from globebudget.models.trip import Trip
from globebudget.models.weekly_plan import WeeklyPlan
from globebudget.models.wishlist import WishlistItem
from globebudget.schemas.budget import Budget, RemainingBudget, TotalBudget, TrackingBudget
from globebudget.schemas.dashboard import Snapshot
from globebudget.schemas.expense import ExpenseRecord
from globebudget.schemas.trip import TripRecord
from globebudget.schemas.weekly_plan import WeeklyPlanRecord
from globebudget.schemas.wishlist import WishlistRecord


def budget_from_row(row: Optional[BudgetRow]) -> Optional[Budget]:
    """Turn a stored (mode, limit) row into its mode-specific variant."""
    if row is None:
        return None
    
    common = dict(
        period_start=row.period_start,
        period_end=row.period_end,
        spent=row.spent or 0,
        planned_spending=row.planned_spending or 0
    )
    if row.mode == BudgetMode.REMAINING:
        return RemainingBudget(balance=row.limit, **common)
    if row.mode == BudgetMode.TRACKING:
        return TrackingBudget(**common)
    return TotalBudget(limit=row.limit, **common)


def load_snapshot(user_id: int, db: Session) -> Snapshot:
    """Read everything the engine needs for one user."""
    budget = db.query(BudgetRow).filter(BudgetRow.user_id == user_id).first()
    trips = db.query(Trip).filter(Trip.user_id == user_id).order_by(Trip.start_date, Trip.id).all()
    expenses = db.query(Expense).filter(Expense.user_id == user_id).order_by(Expense.date, Expense.id).all()
    wishlist = db.query(WishlistItem).filter(WishlistItem.user_id == user_id).all()
    weekly_plans = db.query(WeeklyPlan).options(
        selectinload(WeeklyPlan.events)
    ).filter(WeeklyPlan.user_id == user_id).all()
    
    return Snapshot(
        budget=budget_from_row(budget),
        trips=[TripRecord.model_validate(trip) for trip in trips],
        expenses=[ExpenseRecord.model_validate(expense) for expense in expenses],
        wishlist=[WishlistRecord.model_validate(item) for item in wishlist],
        weekly_plans=[WeeklyPlanRecord.model_validate(plan) for plan in weekly_plans]
    )
