from fastapi import APIRouter
from app.routers import team_members, meetings, cadence, maturity, growth_areas, kras

# Centralized API router hub
# Routers are aggregated here, and main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(team_members.router)
api_router.include_router(meetings.router)
api_router.include_router(cadence.router)
api_router.include_router(maturity.router)
api_router.include_router(growth_areas.router)
api_router.include_router(kras.router)
