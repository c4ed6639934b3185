"""
Pydantic schemas for the engine's inputs snapshot and derived view model.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import date
from decimal import Decimal
from globebudget.schemas.budget import Budget
from globebudget.schemas.trip import TripRecord
from globebudget.schemas.expense import ExpenseRecord
from globebudget.schemas.wishlist import WishlistRecord
from globebudget.schemas.weekly_plan import WeeklyPlanRecord, WeeklyPlanSummary


class Snapshot(BaseModel):
    """Everything the engine needs for one user, read in one go."""
    budget: Optional[Budget] = None
    trips: List[TripRecord] = []
    expenses: List[ExpenseRecord] = []
    wishlist: List[WishlistRecord] = []
    weekly_plans: List[WeeklyPlanRecord] = []


class BudgetFigures(BaseModel):
    """Mode-dependent balance figures."""
    mode: Optional[str] = None
    limit: Decimal = Decimal(0)
    spent: Decimal = Decimal(0)
    total_planned: Decimal = Decimal(0)
    wishlist_total: Decimal = Decimal(0)
    include_wishlist: bool = False
    displayed_planned: Decimal = Decimal(0)  # total_planned, plus wishlist when included
    remaining: Decimal = Decimal(0)
    remaining_after_planned: Decimal = Decimal(0)
    spent_percentage: float = 0.0
    planned_percentage: float = 0.0


class AllowanceFigures(BaseModel):
    """Constant per-day and per-week allowance for the rest of the period."""
    remaining_days: int = 1
    remaining_budget: Decimal = Decimal(0)
    daily_allowance: Decimal = Decimal(0)
    weekly_allowance: Decimal = Decimal(0)


class WeeklyBudgetRow(BaseModel):
    """Even-split budget for one Monday-start week."""
    week: date
    week_end: date
    budget: Decimal
    spent: Decimal
    remaining: Decimal


class Recommendation(BaseModel):
    """Human-readable advice derived from the figures."""
    code: str
    message: str


class DashboardView(BaseModel):
    """Derived view model for one snapshot."""
    today: date
    has_budget: bool
    figures: BudgetFigures
    allowance: AllowanceFigures
    weekly_budgets: List[WeeklyBudgetRow] = []
    current_week: Optional[WeeklyBudgetRow] = None
    weekly_plan: Optional[WeeklyPlanSummary] = None
    recommendations: List[Recommendation] = []
