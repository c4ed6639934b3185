"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from globebudget.db.session import get_db
from globebudget.models.user import User
from globebudget.models.trip import Trip
from globebudget.schemas.trip import TripCreate, TripResponse, TripUpdate
from globebudget.api.dependencies import get_current_user
from globebudget.services.ledger_service import refresh_budget_aggregates

router = APIRouter(prefix="/trips", tags=["trips"])


def get_owned_trip(trip_id: int, user_id: int, db: Session) -> Trip:
    """Get a trip owned by the user."""
    trip = db.query(Trip).filter(
        Trip.id == trip_id,
        Trip.user_id == user_id
    ).first()
    if not trip:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found"
        )
    return trip


@router.get("", response_model=List[TripResponse])
async def list_trips(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all trips ordered by start date."""
    return db.query(Trip).filter(
        Trip.user_id == current_user.id
    ).order_by(Trip.start_date, Trip.id).all()


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new trip."""
    new_trip = Trip(user_id=current_user.id, **trip_data.model_dump())
    db.add(new_trip)
    refresh_budget_aggregates(current_user.id, db)
    db.commit()
    db.refresh(new_trip)
    return new_trip


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update a trip."""
    trip = get_owned_trip(trip_id, current_user.id, db)
    
    updates = {
        field: value
        for field, value in trip_data.model_dump(exclude_unset=True).items()
        if value is not None or field == "notes"
    }
    
    # Validate the merged result before touching the row
    merged = TripCreate(
        name=trip.name,
        destination=trip.destination,
        start_date=trip.start_date,
        end_date=trip.end_date,
        prepaid_cost=trip.prepaid_cost,
        planned_cost=trip.planned_cost,
        notes=trip.notes
    ).model_copy(update=updates)
    if merged.end_date < merged.start_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="end_date must not be before start_date"
        )
    
    for field, value in updates.items():
        setattr(trip, field, value)
    
    refresh_budget_aggregates(current_user.id, db)
    db.commit()
    db.refresh(trip)
    return trip


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a trip."""
    trip = get_owned_trip(trip_id, current_user.id, db)
    db.delete(trip)
    refresh_budget_aggregates(current_user.id, db)
    db.commit()
