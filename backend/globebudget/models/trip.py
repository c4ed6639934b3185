"""
Trip model for planned travel within the budget period.
"""
from sqlalchemy import Column, String, Date, Numeric, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from globebudget.db.base import BaseModel


class Trip(BaseModel):
    """Trip with costs split into already-paid and still-to-spend parts."""
    __tablename__ = "trips"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    destination = Column(String(200), nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    prepaid_cost = Column(Numeric(12, 2), nullable=False, default=0)  # Already spent
    planned_cost = Column(Numeric(12, 2), nullable=False, default=0)  # Still to spend
    notes = Column(Text, nullable=True)
    
    # Relationships
    user = relationship("User", back_populates="trips")
