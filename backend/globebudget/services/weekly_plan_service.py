"""
Weekly planner: compare a hypothetical week against the weekly allowance.

Plans are advisory and never touch the budget's spent or planned figures.
"""
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional
from globebudget.schemas.weekly_plan import WeeklyPlanRecord, WeeklyPlanSummary


def find_plan(plans: Iterable[WeeklyPlanRecord], week_start: date) -> Optional[WeeklyPlanRecord]:
    for plan in plans:
        if plan.week_start == week_start:
            return plan
    return None


def summarize_week(
    plan: Optional[WeeklyPlanRecord],
    week_start: date,
    weekly_allowance: Decimal
) -> WeeklyPlanSummary:
    """Per-day and total planned amounts, and the signed gap to the allowance."""
    if plan is None:
        plan = WeeklyPlanRecord(week_start=week_start)
    
    day_totals = {day: plan.total_for_day(day) for day in range(7)}
    planned_total = plan.total_planned
    difference = weekly_allowance - planned_total
    
    return WeeklyPlanSummary(
        week_start=plan.week_start,
        day_totals=day_totals,
        planned_total=planned_total,
        weekly_allowance=weekly_allowance,
        difference=difference,
        status="under" if difference >= 0 else "over"
    )
