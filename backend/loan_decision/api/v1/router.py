"""API v1 Router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from .endpoints import decisions

api_router = APIRouter()

# Include loan decision endpoints
api_router.include_router(
    decisions.router,
    prefix="/loan",
    tags=["Loan Decisions"]
)
