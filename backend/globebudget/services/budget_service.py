"""
Budget-mode arithmetic.

Pure functions over engine records: nothing here reads the database or
mutates its inputs.

| Mode      | remaining        | remaining_after_planned    |
|-----------|------------------|----------------------------|
| total     | limit - spent    | remaining - total_planned  |
| remaining | balance          | balance - total_planned    |
| tracking  | 0                | 0                          |
"""
from decimal import Decimal
from typing import Iterable, Optional
from globebudget.schemas.budget import Budget, RemainingBudget, TotalBudget, TrackingBudget
from globebudget.schemas.dashboard import BudgetFigures
from globebudget.schemas.expense import ExpenseRecord
from globebudget.schemas.trip import TripRecord
from globebudget.schemas.wishlist import WishlistRecord


def calculate_spent(trips: Iterable[TripRecord], expenses: Iterable[ExpenseRecord]) -> Decimal:
    """Prepaid trip costs plus recorded expenses."""
    trip_spent = sum((trip.prepaid_cost for trip in trips), Decimal(0))
    expense_spent = sum((expense.amount for expense in expenses), Decimal(0))
    return trip_spent + expense_spent


def calculate_planned(trips: Iterable[TripRecord]) -> Decimal:
    """Planned (not yet spent) trip costs."""
    return sum((trip.planned_cost for trip in trips), Decimal(0))


def calculate_wishlist_total(wishlist: Iterable[WishlistRecord]) -> Decimal:
    return sum((item.estimated_cost for item in wishlist), Decimal(0))


def budget_limit(budget: Optional[Budget]) -> Decimal:
    """The mode's ceiling: total pool, current balance, or 0 when tracking."""
    if isinstance(budget, TotalBudget):
        return budget.limit
    if isinstance(budget, RemainingBudget):
        return budget.balance
    return Decimal(0)


def _percentage(part: Decimal, whole: Decimal) -> float:
    if whole <= 0:
        return 0.0
    return float(part / whole * 100)


def calculate_figures(
    budget: Optional[Budget],
    trips: Iterable[TripRecord],
    expenses: Iterable[ExpenseRecord],
    wishlist: Iterable[WishlistRecord] = (),
    include_wishlist: bool = False
) -> BudgetFigures:
    """
    Derive the balance figures for a budget.
    
    The wishlist total is only ever added to the displayed planned figure and
    subtracted from ``remaining_after_planned`` when ``include_wishlist`` is set;
    it never becomes part of ``total_planned``.
    
    Without a budget, spent and planned still reflect the ledger and every
    other figure is zero.
    """
    trips = list(trips)
    spent = calculate_spent(trips, expenses)
    total_planned = calculate_planned(trips)
    wishlist_total = calculate_wishlist_total(wishlist)
    wishlist_share = wishlist_total if include_wishlist else Decimal(0)
    displayed_planned = total_planned + wishlist_share
    
    figures = BudgetFigures(
        spent=spent,
        total_planned=total_planned,
        wishlist_total=wishlist_total,
        include_wishlist=include_wishlist,
        displayed_planned=displayed_planned
    )
    if budget is None:
        return figures
    
    figures.mode = budget.mode
    limit = budget_limit(budget)
    figures.limit = limit
    
    if isinstance(budget, TotalBudget):
        figures.remaining = limit - spent
        figures.remaining_after_planned = figures.remaining - displayed_planned
        figures.spent_percentage = _percentage(spent, limit)
        figures.planned_percentage = _percentage(displayed_planned, limit)
    elif isinstance(budget, RemainingBudget):
        # The balance is already net of past spending
        figures.remaining = limit
        figures.remaining_after_planned = limit - displayed_planned
        figures.planned_percentage = _percentage(displayed_planned, limit)
    elif isinstance(budget, TrackingBudget):
        figures.remaining = Decimal(0)
        figures.remaining_after_planned = Decimal(0)
    
    return figures


def allowance_base(figures: BudgetFigures) -> Decimal:
    """Amount left to spread over the remaining days."""
    if figures.mode is None or figures.mode == "tracking":
        return Decimal(0)
    if figures.include_wishlist:
        return figures.remaining - figures.wishlist_total
    return figures.remaining
