"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from src.api.routers.chart import router as chart_router
from src.api.routers.data import router as data_router
from src.api.routers.health import router as health_router

api_router = APIRouter()

api_router.include_router(health_router, tags=["health"])
api_router.include_router(data_router, prefix="/data", tags=["data"])
api_router.include_router(chart_router, prefix="/chart", tags=["chart"])
