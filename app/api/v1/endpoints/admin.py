"""Endpoints administrativos de estatísticas (exigem API key)"""
from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.core.security import require_admin_key
from app.services.recalculation_service import RecalculationService
from app.services.statistics_service import StatisticsService
import logging

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_admin_key)])


@router.post("/reset/{discipline_id}")
async def reset_statistics(
    discipline_id: int = Path(..., gt=0, description="ID da modalidade"),
    db: AsyncSession = Depends(get_db)
):
    """Zera as estatísticas de todos os times da modalidade"""
    count = await StatisticsService(db).reset_statistics(discipline_id)
    return {"message": "Estatísticas resetadas com sucesso", "count": count}


@router.post("/recalculate")
async def recalculate_statistics(
    background: bool = Query(False, description="Enfileira no Celery em vez de executar na requisição"),
    db: AsyncSession = Depends(get_db)
):
    """
    Reconstrói todas as estatísticas a partir dos jogos finalizados.

    - `background=false`: executa e retorna o resumo
    - `background=true`: dispara a task Celery e retorna 202 com o ID
    """
    if background:
        from app.tasks.statistics import recalculate_statistics_task

        result = recalculate_statistics_task.delay()
        logger.info(f"Recálculo de estatísticas enfileirado (task {result.id})")
        return JSONResponse(
            status_code=202,
            content={"message": "Recálculo de estatísticas enfileirado", "taskId": result.id},
        )

    summary = await RecalculationService(db).recalculate_all()
    return {
        "message": "Estatísticas recalculadas com sucesso",
        "summary": summary.model_dump(by_alias=True),
    }
