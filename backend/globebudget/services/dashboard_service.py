"""
Allocation engine entry point: snapshot in, view model out.
"""
from datetime import date
from globebudget.core.utils import start_of_week
from globebudget.schemas.dashboard import DashboardView, Snapshot
from globebudget.services.allowance_service import calculate_allowance, calculate_weekly_budgets, get_current_week
from globebudget.services.budget_service import calculate_figures
from globebudget.services.recommendation_service import get_recommendations
from globebudget.services.weekly_plan_service import find_plan, summarize_week


def build_dashboard(snapshot: Snapshot, today: date, include_wishlist: bool = False) -> DashboardView:
    """Recompute every derived figure from scratch for one snapshot."""
    budget = snapshot.budget
    figures = calculate_figures(
        budget,
        snapshot.trips,
        snapshot.expenses,
        snapshot.wishlist,
        include_wishlist=include_wishlist
    )
    allowance = calculate_allowance(budget, figures, today)
    
    if budget is None:
        return DashboardView(today=today, has_budget=False, figures=figures, allowance=allowance)
    
    weekly_budgets = calculate_weekly_budgets(budget, snapshot.trips, snapshot.expenses)
    current_week = get_current_week(weekly_budgets, today)
    week_start = start_of_week(today)
    weekly_plan = summarize_week(
        find_plan(snapshot.weekly_plans, week_start),
        week_start,
        allowance.weekly_allowance
    )
    
    return DashboardView(
        today=today,
        has_budget=True,
        figures=figures,
        allowance=allowance,
        weekly_budgets=weekly_budgets,
        current_week=current_week,
        weekly_plan=weekly_plan,
        recommendations=get_recommendations(figures, current_week, snapshot.trips, today)
    )
