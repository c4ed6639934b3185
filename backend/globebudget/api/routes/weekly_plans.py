"""
Weekly planner routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date
from globebudget.db.session import get_db
from globebudget.models.user import User
from globebudget.models.weekly_plan import WeeklyPlan, WeeklyPlanEvent
from globebudget.schemas.weekly_plan import (
    WeeklyPlanEventCreate, WeeklyPlanEventResponse, WeeklyPlanRecord, WeeklyPlanResponse, WeeklyPlanSummary
)
from globebudget.api.dependencies import get_current_user
from globebudget.services.allowance_service import calculate_allowance
from globebudget.services.budget_service import calculate_figures
from globebudget.services.snapshot_service import load_snapshot
from globebudget.services.weekly_plan_service import summarize_week

router = APIRouter(prefix="/weekly-plans", tags=["weekly-plans"])


def check_week_start(week_start: date) -> date:
    """Reject week starts that are not Mondays."""
    if week_start.weekday() != 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="week_start must be a Monday"
        )
    return week_start


def get_plan(user_id: int, week_start: date, db: Session) -> Optional[WeeklyPlan]:
    return db.query(WeeklyPlan).filter(
        WeeklyPlan.user_id == user_id,
        WeeklyPlan.week_start == week_start
    ).first()


def create_or_get_plan(user_id: int, week_start: date, db: Session) -> WeeklyPlan:
    """One plan per user per week."""
    plan = get_plan(user_id, week_start, db)
    if plan:
        return plan
    plan = WeeklyPlan(user_id=user_id, week_start=week_start)
    db.add(plan)
    db.commit()
    db.refresh(plan)
    return plan


@router.get("/{week_start}", response_model=WeeklyPlanResponse)
async def get_weekly_plan(
    week_start: date,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get (creating if needed) the plan for a week."""
    check_week_start(week_start)
    return create_or_get_plan(current_user.id, week_start, db)


@router.post("/{week_start}/events", response_model=WeeklyPlanEventResponse, status_code=status.HTTP_201_CREATED)
async def add_event(
    week_start: date,
    event_data: WeeklyPlanEventCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add an event to a week's plan."""
    check_week_start(week_start)
    plan = create_or_get_plan(current_user.id, week_start, db)
    
    event = WeeklyPlanEvent(
        plan_id=plan.id,
        day_of_week=event_data.day_of_week,
        event_name=event_data.event_name,
        amount=event_data.amount
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a single event."""
    event = db.query(WeeklyPlanEvent).join(WeeklyPlan).filter(
        WeeklyPlanEvent.id == event_id,
        WeeklyPlan.user_id == current_user.id
    ).first()
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found"
        )
    db.delete(event)
    db.commit()


@router.delete("/{week_start}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_weekly_plan(
    week_start: date,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a week's plan together with its events."""
    plan = get_plan(current_user.id, check_week_start(week_start), db)
    if not plan:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Weekly plan not found"
        )
    db.delete(plan)
    db.commit()


@router.get("/{week_start}/summary", response_model=WeeklyPlanSummary)
async def get_weekly_summary(
    week_start: date,
    include_wishlist: bool = False,
    today: Optional[date] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Compare the week's planned total with the current weekly allowance."""
    check_week_start(week_start)
    snapshot = load_snapshot(current_user.id, db)
    figures = calculate_figures(
        snapshot.budget,
        snapshot.trips,
        snapshot.expenses,
        snapshot.wishlist,
        include_wishlist=include_wishlist
    )
    allowance = calculate_allowance(snapshot.budget, figures, today or date.today())
    
    plan = get_plan(current_user.id, week_start, db)
    record = WeeklyPlanRecord.model_validate(plan) if plan else None
    return summarize_week(record, week_start, allowance.weekly_allowance)
