"""Endpoints de Estatísticas (classificação, artilharia, jogador, time)"""
from fastapi import APIRouter, Depends, Path, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from app.core.config import settings
from app.core.database import get_db
from app.core.etag import etag_response
from app.core.rate_limit import limiter
from app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("/ranking/{discipline_id}")
@limiter.limit(settings.RATE_LIMIT_READS)
@etag_response
async def get_ranking(
    request: Request,
    discipline_id: int = Path(..., gt=0, description="ID da modalidade"),
    edition_id: Optional[int] = Query(None, alias="editionId", gt=0),
    db: AsyncSession = Depends(get_db)
):
    """Tabela de classificação da modalidade"""
    service = StatisticsService(db)
    await service.ensure_discipline(discipline_id)
    return await service.get_standings(discipline_id, edition_id)


@router.get("/top-scorers/{discipline_id}")
@limiter.limit(settings.RATE_LIMIT_READS)
@etag_response
async def get_top_scorers(
    request: Request,
    discipline_id: int = Path(..., gt=0, description="ID da modalidade"),
    edition_id: Optional[int] = Query(None, alias="editionId", gt=0),
    limit: int = Query(settings.TOP_SCORERS_DEFAULT_LIMIT, description="Máximo de artilheiros"),
    db: AsyncSession = Depends(get_db)
):
    """Artilharia da modalidade"""
    service = StatisticsService(db)
    await service.ensure_discipline(discipline_id)
    return await service.get_top_scorers(discipline_id, edition_id, limit)


@router.get("/player/{player_id}")
@router.get("/jogador/{player_id}", include_in_schema=False)
@limiter.limit(settings.RATE_LIMIT_READS)
@etag_response
async def get_player_statistics(
    request: Request,
    player_id: int = Path(..., gt=0, description="ID do jogador"),
    discipline_id: Optional[int] = Query(None, alias="disciplineId", gt=0),
    db: AsyncSession = Depends(get_db)
):
    """Estatísticas de um jogador (em uma modalidade ou em todas)"""
    service = StatisticsService(db)
    return await service.get_player_statistics(player_id, discipline_id)


@router.get("/team/{team_id}")
@router.get("/time/{team_id}", include_in_schema=False)
@limiter.limit(settings.RATE_LIMIT_READS)
@etag_response
async def get_team_statistics(
    request: Request,
    team_id: int = Path(..., gt=0, description="ID do time"),
    discipline_id: Optional[int] = Query(None, alias="disciplineId", gt=0),
    db: AsyncSession = Depends(get_db)
):
    """Estatísticas de um time (em uma modalidade ou em todas)"""
    service = StatisticsService(db)
    return await service.get_team_statistics(team_id, discipline_id)
