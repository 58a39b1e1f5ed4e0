"""Router principal da API v1"""
from fastapi import APIRouter
from app.api.v1.endpoints import admin, dashboard, statistics

api_router = APIRouter()

api_router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
api_router.include_router(dashboard.router, prefix="/statistics/dashboard", tags=["dashboard"])
api_router.include_router(admin.router, prefix="/statistics", tags=["admin"])
