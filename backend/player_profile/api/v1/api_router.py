from fastapi import APIRouter

from .endpoints import profile

# This router will be included with the /api/v1 prefix by main.py,
# so a GET "/{player_id}" in profile.router becomes GET "/api/v1/profile/{player_id}".
api_router = APIRouter()

api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
