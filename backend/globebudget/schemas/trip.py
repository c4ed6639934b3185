"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, Field, computed_field, model_validator
from typing import Optional
from datetime import date, datetime
from decimal import Decimal


class TripBase(BaseModel):
    """Base trip schema."""
    name: str
    destination: str
    start_date: date
    end_date: date
    prepaid_cost: Decimal = Field(default=Decimal(0), ge=0)  # Already spent
    planned_cost: Decimal = Field(default=Decimal(0), ge=0)  # Still to spend
    notes: Optional[str] = None
    
    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TripCreate(TripBase):
    """Schema for trip creation."""
    pass


class TripUpdate(BaseModel):
    """Schema for trip update."""
    name: Optional[str] = None
    destination: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    prepaid_cost: Optional[Decimal] = Field(default=None, ge=0)
    planned_cost: Optional[Decimal] = Field(default=None, ge=0)
    notes: Optional[str] = None


class TripRecord(TripBase):
    """Trip as handed to the allocation engine."""
    id: Optional[int] = None
    
    @computed_field
    @property
    def total_cost(self) -> Decimal:
        return self.prepaid_cost + self.planned_cost
    
    def is_upcoming(self, today: date) -> bool:
        return self.start_date > today
    
    class Config:
        from_attributes = True


class TripResponse(TripRecord):
    """Schema for trip response."""
    id: int
    created_at: datetime
    updated_at: datetime
