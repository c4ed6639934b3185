"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from globebudget.api.routes import (
    users, budget, trips, expenses, wishlist, weekly_plans, fx_rates, dashboard
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router)
api_router.include_router(budget.router)
api_router.include_router(trips.router)
api_router.include_router(expenses.router)
api_router.include_router(wishlist.router)
api_router.include_router(weekly_plans.router)
api_router.include_router(fx_rates.router)
api_router.include_router(dashboard.router)
