"""
Pydantic schemas for WeeklyPlan and WeeklyPlanEvent entities.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
from datetime import date, datetime
from decimal import Decimal


class WeeklyPlanEventBase(BaseModel):
    """Base weekly plan event schema."""
    day_of_week: int = Field(ge=0, le=6)  # 0 = Monday, 6 = Sunday
    event_name: str
    amount: Decimal = Field(default=Decimal(0), ge=0)


class WeeklyPlanEventCreate(WeeklyPlanEventBase):
    """Schema for weekly plan event creation."""
    pass


class WeeklyPlanEventRecord(WeeklyPlanEventBase):
    """Weekly plan event as handed to the planner."""
    id: Optional[int] = None
    
    class Config:
        from_attributes = True


class WeeklyPlanEventResponse(WeeklyPlanEventRecord):
    """Schema for weekly plan event response."""
    id: int
    plan_id: int
    created_at: datetime


class WeeklyPlanRecord(BaseModel):
    """A week's plan; events are kept in creation order."""
    id: Optional[int] = None
    week_start: date
    events: List[WeeklyPlanEventRecord] = []
    
    @field_validator("week_start")
    @classmethod
    def check_monday(cls, v: date) -> date:
        if v.weekday() != 0:
            raise ValueError("week_start must be a Monday")
        return v
    
    @property
    def total_planned(self) -> Decimal:
        return sum((event.amount for event in self.events), Decimal(0))
    
    def events_for_day(self, day_of_week: int) -> List[WeeklyPlanEventRecord]:
        return [event for event in self.events if event.day_of_week == day_of_week]
    
    def total_for_day(self, day_of_week: int) -> Decimal:
        return sum((event.amount for event in self.events_for_day(day_of_week)), Decimal(0))
    
    class Config:
        from_attributes = True


class WeeklyPlanResponse(WeeklyPlanRecord):
    """Schema for weekly plan response."""
    id: int
    events: List[WeeklyPlanEventResponse] = []
    created_at: datetime
    updated_at: datetime


class WeeklyPlanSummary(BaseModel):
    """Planned week compared against the weekly allowance."""
    week_start: date
    day_totals: Dict[int, Decimal]  # day_of_week -> planned amount
    planned_total: Decimal
    weekly_allowance: Decimal
    difference: Decimal  # weekly_allowance - planned_total
    status: str  # "under" or "over"
