"""Models package - Import all models for SQLAlchemy registration."""
from globebudget.models.user import User
from globebudget.models.budget import Budget, BudgetMode
from globebudget.models.trip import Trip
from globebudget.models.expense import Expense
from globebudget.models.wishlist import WishlistItem
from globebudget.models.weekly_plan import WeeklyPlan, WeeklyPlanEvent
from globebudget.models.exchange_rate import ExchangeRate

__all__ = [
    "User",
    "Budget",
    "BudgetMode",
    "Trip",
    "Expense",
    "WishlistItem",
    "WeeklyPlan",
    "WeeklyPlanEvent",
    "ExchangeRate",
]
