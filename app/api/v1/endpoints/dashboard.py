"""Endpoints do Dashboard"""
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.core.database import get_db
from app.core.etag import etag_response
from app.core.rate_limit import limiter
from app.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/summary")
@limiter.limit(settings.RATE_LIMIT_READS)
@etag_response
async def get_dashboard_summary(request: Request, db: AsyncSession = Depends(get_db)):
    """Total de jogos, jogos por status e melhores campanhas"""
    return await DashboardService(db).get_summary()


@router.get("/top-scorers")
@limiter.limit(settings.RATE_LIMIT_READS)
@etag_response
async def get_dashboard_top_scorers(
    request: Request,
    limit: int = Query(settings.TOP_SCORERS_DEFAULT_LIMIT),
    db: AsyncSession = Depends(get_db)
):
    """Artilheiros de todas as modalidades"""
    return await DashboardService(db).get_top_scorers(limit)


@router.get("/chart-data")
@limiter.limit(settings.RATE_LIMIT_READS)
@etag_response
async def get_dashboard_chart_data(
    request: Request,
    metric: str = Query("goals", max_length=50),
    period: str = Query("month", max_length=20),
    db: AsyncSession = Depends(get_db)
):
    """Dados de gráfico (stub com valores sintéticos)"""
    return await DashboardService(db).get_chart_data(metric, period)
