"""
API Router Aggregator.

Combines all v1 API routers into a single router for the main app.
"""

from fastapi import APIRouter

from app.api.v1 import job, user

api_router = APIRouter()

# Include all v1 routers with their prefixes and tags
api_router.include_router(
    user.router,
    prefix="/user",
    tags=["User"],
)

api_router.include_router(
    job.router,
    prefix="/job",
    tags=["Job"],
)
