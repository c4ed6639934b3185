"""
Daily/weekly allowance and trip-to-week cost distribution.
"""
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, List, Optional
from globebudget.core.utils import each_week_of_interval, is_within, start_of_week
from globebudget.schemas.budget import Budget
from globebudget.schemas.dashboard import AllowanceFigures, BudgetFigures, WeeklyBudgetRow
from globebudget.schemas.expense import ExpenseRecord
from globebudget.schemas.trip import TripRecord
from globebudget.services.budget_service import allowance_base, budget_limit


def calculate_remaining_days(period_start: date, period_end: date, today: date) -> int:
    """
    Days left in the period, counting today. Never less than 1.
    
    Before the period starts the whole period counts; after it ends the
    result is floored at 1.
    """
    if today < period_start:
        days = (period_end - period_start).days + 1
    elif today > period_end:
        days = 1
    else:
        days = (period_end - today).days + 1
    return max(days, 1)


def calculate_allowance(
    budget: Optional[Budget],
    figures: BudgetFigures,
    today: date
) -> AllowanceFigures:
    """Spread the remaining budget evenly across the remaining days."""
    if budget is None:
        return AllowanceFigures()
    
    remaining_days = calculate_remaining_days(budget.period_start, budget.period_end, today)
    remaining_budget = allowance_base(figures)
    daily = remaining_budget / remaining_days
    
    return AllowanceFigures(
        remaining_days=remaining_days,
        remaining_budget=remaining_budget,
        daily_allowance=daily,
        weekly_allowance=daily * 7
    )


def trip_overlaps_week(trip: TripRecord, week_start: date, week_end: date) -> bool:
    """Trip starts or ends inside the week, or covers it entirely."""
    return (
        is_within(trip.start_date, week_start, week_end)
        or is_within(trip.end_date, week_start, week_end)
        or (trip.start_date <= week_start and trip.end_date >= week_end)
    )


def weeks_in_trip(trip: TripRecord) -> int:
    duration = max(1, (trip.end_date - trip.start_date).days)
    return -(-duration // 7)


def trip_cost_per_week(trip: TripRecord) -> Decimal:
    """
    Even share of the trip's total cost for each overlapping week.
    
    The cost is divided by the number of weeks the trip's duration spans,
    not prorated by how many trip days fall inside a given week.
    """
    return trip.total_cost / weeks_in_trip(trip)


def calculate_weekly_budgets(
    budget: Optional[Budget],
    trips: Iterable[TripRecord],
    expenses: Iterable[ExpenseRecord] = ()
) -> List[WeeklyBudgetRow]:
    """Split the budget evenly across the Monday-start weeks of its period."""
    if budget is None:
        return []
    
    weeks = each_week_of_interval(budget.period_start, budget.period_end)
    if not weeks:
        return []
    
    trips = list(trips)
    expenses = list(expenses)
    weekly_amount = budget_limit(budget) / len(weeks)
    
    rows = []
    for week_start in weeks:
        week_end = week_start + timedelta(days=6)
        
        trip_spent = sum(
            (trip_cost_per_week(trip) for trip in trips if trip_overlaps_week(trip, week_start, week_end)),
            Decimal(0)
        )
        expense_spent = sum(
            (expense.amount for expense in expenses if is_within(expense.date, week_start, week_end)),
            Decimal(0)
        )
        week_spent = trip_spent + expense_spent
        
        rows.append(WeeklyBudgetRow(
            week=week_start,
            week_end=week_end,
            budget=weekly_amount,
            spent=week_spent,
            remaining=weekly_amount - week_spent
        ))
    
    return rows


def get_current_week(weekly_budgets: Iterable[WeeklyBudgetRow], today: date) -> Optional[WeeklyBudgetRow]:
    current = start_of_week(today)
    for row in weekly_budgets:
        if row.week == current:
            return row
    return None
