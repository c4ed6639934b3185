"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for user creation."""
    username: str


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    username: str
    created_at: datetime
    
    class Config:
        from_attributes = True
