"""
Pydantic schemas for Budget entity.

A stored budget row carries a ``mode`` plus a ``limit`` whose meaning depends
on the mode. The engine works on a tagged variant instead, one class per mode,
each carrying only the fields that mode gives a meaning to.
"""
from pydantic import BaseModel, Field, model_validator
from typing import Annotated, Literal, Optional, Union
from datetime import date, datetime
from decimal import Decimal
from globebudget.models.budget import BudgetMode
from globebudget.schemas.expense import ExpenseResponse


class BudgetPeriod(BaseModel):
    """Inclusive calendar period shared by every budget mode."""
    period_start: date
    period_end: date
    spent: Decimal = Decimal(0)  # Cached by the storage layer
    planned_spending: Decimal = Decimal(0)  # Cached by the storage layer
    
    @model_validator(mode="after")
    def check_period(self):
        if self.period_end < self.period_start:
            raise ValueError("period_end must not be before period_start")
        return self


class TotalBudget(BudgetPeriod):
    """Fixed pool for the period; spending is subtracted from it."""
    mode: Literal["total"] = "total"
    limit: Decimal = Field(ge=0)


class RemainingBudget(BudgetPeriod):
    """Live balance, already net of past spending."""
    mode: Literal["remaining"] = "remaining"
    balance: Decimal


class TrackingBudget(BudgetPeriod):
    """No ceiling; spending is only tracked."""
    mode: Literal["tracking"] = "tracking"


Budget = Annotated[Union[TotalBudget, RemainingBudget, TrackingBudget], Field(discriminator="mode")]


class BudgetCreate(BaseModel):
    """Schema for budget creation or replacement."""
    mode: BudgetMode = BudgetMode.TOTAL
    limit: Decimal = Field(default=Decimal(0), ge=0)  # Total budget, or current balance in remaining mode
    period_start: date
    period_end: date
    
    @model_validator(mode="after")
    def check_period(self):
        if self.period_end < self.period_start:
            raise ValueError("period_end must not be before period_start")
        return self


class BudgetResponse(BaseModel):
    """Schema for budget response."""
    id: int
    user_id: int
    mode: BudgetMode
    limit: Decimal
    period_start: date
    period_end: date
    spent: Decimal
    planned_spending: Decimal
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class BalanceUpdate(BaseModel):
    """New absolute balance for a remaining-mode budget."""
    new_balance: Decimal = Field(gt=0)
    currency: Optional[str] = None  # Converted to the home currency when given
    include_fee: bool = False


class BalanceUpdateResponse(BaseModel):
    """Budget after a balance update, with the adjustment expense if one was recorded."""
    budget: BudgetResponse
    adjustment: Optional[ExpenseResponse] = None
    fx_warning: Optional[str] = None
