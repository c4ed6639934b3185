"""
Tests for budget-mode arithmetic.
"""
from datetime import date
from decimal import Decimal
import pytest
from pydantic import ValidationError
from globebudget.schemas.budget import RemainingBudget, TotalBudget, TrackingBudget
from globebudget.schemas.expense import ExpenseRecord
from globebudget.schemas.trip import TripRecord
from globebudget.schemas.wishlist import WishlistRecord
from globebudget.services.budget_service import allowance_base, calculate_figures

PERIOD = dict(period_start=date(2026, 9, 1), period_end=date(2026, 9, 30))


def make_trip(prepaid="0", planned="0", start=date(2026, 9, 20), end=date(2026, 9, 22)):
    return TripRecord(
        name="Weekend",
        destination="Lisbon",
        start_date=start,
        end_date=end,
        prepaid_cost=Decimal(prepaid),
        planned_cost=Decimal(planned)
    )


def make_expense(amount, day=date(2026, 9, 5)):
    return ExpenseRecord(description="Groceries", amount=Decimal(amount), date=day)


def test_total_mode_scenario():
    """Total 1000 with 200 spent and 100 planned."""
    budget = TotalBudget(limit=Decimal(1000), **PERIOD)
    figures = calculate_figures(budget, [make_trip(planned="100")], [make_expense("200")])
    
    assert figures.spent == Decimal(200)
    assert figures.total_planned == Decimal(100)
    assert figures.remaining == Decimal(800)
    assert figures.remaining_after_planned == Decimal(700)
    assert figures.spent_percentage == pytest.approx(20.0)
    assert figures.planned_percentage == pytest.approx(10.0)


@pytest.mark.parametrize("spent", ["0", "1", "250.50", "999.99", "1000"])
def test_total_mode_remaining_plus_spent_is_limit(spent):
    budget = TotalBudget(limit=Decimal(1000), **PERIOD)
    expenses = [make_expense(spent)] if Decimal(spent) > 0 else []
    figures = calculate_figures(budget, [make_trip(planned="75")], expenses)
    
    assert figures.remaining + figures.spent == budget.limit
    assert figures.remaining_after_planned == figures.remaining - figures.total_planned


def test_prepaid_trip_cost_counts_as_spent():
    budget = TotalBudget(limit=Decimal(1000), **PERIOD)
    figures = calculate_figures(budget, [make_trip(prepaid="150", planned="50")], [make_expense("20")])
    
    assert figures.spent == Decimal(170)
    assert figures.total_planned == Decimal(50)
    assert figures.remaining == Decimal(830)


def test_remaining_mode_does_not_subtract_spent():
    budget = RemainingBudget(balance=Decimal(450), **PERIOD)
    figures = calculate_figures(budget, [make_trip(planned="100")], [make_expense("50")])
    
    assert figures.spent == Decimal(50)
    assert figures.remaining == Decimal(450)
    assert figures.remaining_after_planned == Decimal(350)


def test_tracking_mode_reports_zero():
    budget = TrackingBudget(**PERIOD)
    figures = calculate_figures(budget, [make_trip(prepaid="10", planned="90")], [make_expense("500")])
    
    assert figures.spent == Decimal(510)
    assert figures.remaining == 0
    assert figures.remaining_after_planned == 0
    assert figures.spent_percentage == 0.0
    assert allowance_base(figures) == 0


def test_wishlist_toggle_only_changes_displayed_figures():
    budget = TotalBudget(limit=Decimal(1000), **PERIOD)
    wishlist = [
        WishlistRecord(name="Concert", location="Berlin", estimated_cost=Decimal(60)),
        WishlistRecord(name="Museum", location="Paris", estimated_cost=Decimal(40)),
    ]
    trips = [make_trip(planned="100")]
    
    without = calculate_figures(budget, trips, [], wishlist)
    with_wishlist = calculate_figures(budget, trips, [], wishlist, include_wishlist=True)
    
    assert without.wishlist_total == Decimal(100)
    assert without.displayed_planned == Decimal(100)
    assert with_wishlist.total_planned == Decimal(100)
    assert with_wishlist.displayed_planned == Decimal(200)
    assert with_wishlist.remaining == without.remaining
    assert with_wishlist.remaining_after_planned == Decimal(800)
    assert allowance_base(with_wishlist) == Decimal(900)


def test_missing_budget_is_all_zero():
    figures = calculate_figures(None, [make_trip(prepaid="10", planned="5")], [make_expense("3")])
    
    assert figures.mode is None
    assert figures.spent == Decimal(13)
    assert figures.total_planned == Decimal(5)
    assert figures.remaining == 0
    assert figures.remaining_after_planned == 0
    assert allowance_base(figures) == 0


def test_budget_period_must_not_end_before_start():
    with pytest.raises(ValidationError):
        TotalBudget(limit=Decimal(100), period_start=date(2026, 9, 30), period_end=date(2026, 9, 1))


def test_negative_costs_are_rejected():
    with pytest.raises(ValidationError):
        make_trip(prepaid="-1")
    with pytest.raises(ValidationError):
        make_expense("0")
    with pytest.raises(ValidationError):
        WishlistRecord(name="x", location="y", estimated_cost=Decimal(-5))
