"""
Recommendation rules derived from the computed figures.

Rules are evaluated independently, in priority order:
overall balance, current week, then upcoming trips. When none fires a single
affirmation is returned.
"""
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional
from globebudget.core.config import settings
from globebudget.schemas.dashboard import BudgetFigures, Recommendation, WeeklyBudgetRow
from globebudget.schemas.trip import TripRecord


def _money(amount: Decimal, currency: str) -> str:
    return f"{amount:.2f} {currency}"


def get_recommendations(
    figures: BudgetFigures,
    current_week: Optional[WeeklyBudgetRow],
    trips: Iterable[TripRecord],
    today: date,
    currency: Optional[str] = None
) -> List[Recommendation]:
    """Build the ordered list of warnings for a budget's figures."""
    if figures.mode is None:
        return []
    
    currency = currency or settings.HOME_CURRENCY
    recommendations = []
    
    # Without a ceiling only the affirmation applies
    if figures.mode == "tracking":
        return [Recommendation(
            code="on_track",
            message="Your budget looks good! Keep tracking your spending."
        )]
    
    remaining = figures.remaining
    if remaining < 0:
        recommendations.append(Recommendation(
            code="over_budget",
            message="You have exceeded your budget. Consider reducing trip costs or removing some trips."
        ))
    elif remaining < figures.limit * Decimal(str(settings.LOW_BALANCE_RATIO)):
        recommendations.append(Recommendation(
            code="low_balance",
            message=f"You have less than {settings.LOW_BALANCE_RATIO:.0%} of your budget remaining. Be mindful of spending."
        ))
    
    if current_week is not None:
        if current_week.remaining < 0:
            recommendations.append(Recommendation(
                code="over_budget_week",
                message="This week you are over budget. Try to reduce spending in upcoming weeks."
            ))
        elif current_week.remaining < current_week.budget * Decimal(str(settings.LOW_WEEK_BALANCE_RATIO)):
            recommendations.append(Recommendation(
                code="low_week_balance",
                message="You have limited budget remaining for this week. Plan accordingly."
            ))
    
    upcoming = [trip for trip in trips if trip.is_upcoming(today)]
    if upcoming:
        upcoming_cost = sum((trip.total_cost for trip in upcoming), Decimal(0))
        if upcoming_cost > remaining:
            shortfall = upcoming_cost - remaining
            recommendations.append(Recommendation(
                code="upcoming_trips_shortfall",
                message=(
                    f"You have {len(upcoming)} upcoming trip(s) totaling {_money(upcoming_cost, currency)}, "
                    f"but only {_money(remaining, currency)} remaining "
                    f"({_money(shortfall, currency)} short). Consider adjusting your plans."
                )
            ))
    
    if not recommendations:
        recommendations.append(Recommendation(
            code="on_track",
            message="Your budget looks good! Keep tracking your spending."
        ))
    
    return recommendations
