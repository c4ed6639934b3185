"""
Weekly plan models for the advisory week planner.
"""
from sqlalchemy import CheckConstraint, Column, String, Date, Numeric, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from globebudget.db.base import BaseModel


class WeeklyPlan(BaseModel):
    """Scratch plan for one calendar week (one per user per week)."""
    __tablename__ = "weekly_plans"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    week_start = Column(Date, nullable=False)  # Monday of the week
    
    # Relationships
    user = relationship("User", back_populates="weekly_plans")
    events = relationship(
        "WeeklyPlanEvent",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="WeeklyPlanEvent.id"
    )
    
    __table_args__ = (
        UniqueConstraint('user_id', 'week_start', name='uq_user_week_plan'),
    )


class WeeklyPlanEvent(BaseModel):
    """Single planned event owned by a weekly plan."""
    __tablename__ = "weekly_plan_events"
    
    plan_id = Column(Integer, ForeignKey("weekly_plans.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = Column(Integer, nullable=False)  # 0 = Monday, 6 = Sunday
    event_name = Column(String(200), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False, default=0)
    
    # Relationships
    plan = relationship("WeeklyPlan", back_populates="events")
    
    __table_args__ = (
        CheckConstraint('day_of_week >= 0 AND day_of_week <= 6', name='ck_event_day_of_week'),
    )
