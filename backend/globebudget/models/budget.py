"""
Budget model for the semester allocation.
"""
from sqlalchemy import Column, Date, Enum as SQLEnum, ForeignKey, Integer, Numeric, UniqueConstraint
from sqlalchemy.orm import relationship
from globebudget.db.base import BaseModel
import enum


class BudgetMode(str, enum.Enum):
    """Budget mode enumeration."""
    TOTAL = "total"
    REMAINING = "remaining"
    TRACKING = "tracking"


class Budget(BaseModel):
    """Active budget per user. ``limit`` is interpreted according to ``mode``."""
    __tablename__ = "budgets"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    mode = Column(SQLEnum(BudgetMode, values_callable=lambda e: [m.value for m in e]),
                  default=BudgetMode.TOTAL, nullable=False)
    limit = Column("budget_limit", Numeric(12, 2), nullable=False, default=0)  # Total pool, or current balance in remaining mode
    period_start = Column(Date, nullable=False)
    period_end = Column(Date, nullable=False)
    spent = Column(Numeric(12, 2), nullable=False, default=0)  # Cached: prepaid trip costs + expenses
    planned_spending = Column(Numeric(12, 2), nullable=False, default=0)  # Cached: planned trip costs
    
    # Relationships
    user = relationship("User", back_populates="budget")
    
    # Unique constraint: one active budget per user
    __table_args__ = (
        UniqueConstraint('user_id', name='uq_user_budget'),
    )
