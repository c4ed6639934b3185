"""
Tests for recommendation rules.
"""
from datetime import date
from decimal import Decimal
from globebudget.schemas.dashboard import BudgetFigures, WeeklyBudgetRow
from globebudget.schemas.trip import TripRecord
from globebudget.services.recommendation_service import get_recommendations

TODAY = date(2026, 10, 19)


def figures(remaining, limit=1000, mode="total"):
    return BudgetFigures(mode=mode, limit=Decimal(limit), remaining=Decimal(remaining))


def week(budget, spent):
    return WeeklyBudgetRow(
        week=TODAY,
        week_end=date(2026, 10, 25),
        budget=Decimal(budget),
        spent=Decimal(spent),
        remaining=Decimal(budget) - Decimal(spent)
    )


def trip(start, cost):
    return TripRecord(
        name="Trip",
        destination="Prague",
        start_date=start,
        end_date=start,
        planned_cost=Decimal(cost)
    )


def codes(recommendations):
    return [r.code for r in recommendations]


def test_on_track():
    result = get_recommendations(figures(800), week(100, 10), [], TODAY)
    assert codes(result) == ["on_track"]


def test_over_budget():
    assert codes(get_recommendations(figures(-5), None, [], TODAY)) == ["over_budget"]


def test_low_balance():
    assert codes(get_recommendations(figures(99), None, [], TODAY)) == ["low_balance"]
    assert codes(get_recommendations(figures(100), None, [], TODAY)) == ["on_track"]


def test_week_rules():
    assert codes(get_recommendations(figures(800), week(100, 120), [], TODAY)) == ["over_budget_week"]
    assert codes(get_recommendations(figures(800), week(100, 85), [], TODAY)) == ["low_week_balance"]


def test_rules_combine_in_priority_order():
    trips = [trip(date(2026, 11, 2), 300)]
    result = get_recommendations(figures(-50), week(100, 150), trips, TODAY)
    
    assert codes(result) == ["over_budget", "over_budget_week", "upcoming_trips_shortfall"]


def test_upcoming_trips_shortfall_reports_figures():
    trips = [trip(date(2026, 11, 2), 300), trip(date(2026, 12, 1), 250), trip(date(2026, 10, 1), 999)]
    result = get_recommendations(figures(500), None, trips, TODAY, currency="USD")
    
    assert codes(result) == ["upcoming_trips_shortfall"]
    message = result[0].message
    assert "2 upcoming trip(s)" in message
    assert "550.00 USD" in message
    assert "500.00 USD" in message
    assert "50.00 USD short" in message


def test_trip_starting_today_is_not_upcoming():
    result = get_recommendations(figures(100, limit=100), None, [trip(TODAY, 5000)], TODAY)
    assert codes(result) == ["on_track"]


def test_tracking_mode_only_affirms():
    result = get_recommendations(figures(0, limit=0, mode="tracking"), week(0, 40), [trip(date(2026, 11, 2), 300)], TODAY)
    assert codes(result) == ["on_track"]


def test_missing_budget_has_no_recommendations():
    assert get_recommendations(BudgetFigures(), None, [], TODAY) == []
