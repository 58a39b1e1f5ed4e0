"""Tasks de recálculo de estatísticas"""
import asyncio
from app.tasks.celery_app import celery_app
from app.core.database import task_session
from app.services.recalculation_service import RecalculationService
import logging

logger = logging.getLogger(__name__)


async def _recalculate() -> dict:
    async with task_session() as db:
        summary = await RecalculationService(db).recalculate_all()
    return summary.model_dump(by_alias=True)


@celery_app.task(bind=True, max_retries=3, name='app.tasks.statistics.recalculate_statistics_task')
def recalculate_statistics_task(self):
    """Reconstrói todas as estatísticas a partir dos jogos finalizados"""
    try:
        summary = asyncio.run(_recalculate())
        return {"status": "success", "summary": summary}
    except Exception as e:
        # Recálculo é idempotente: qualquer falha (inclusive StoreError) volta para a fila
        logger.error(f"Erro ao recalcular estatísticas (tentativa {self.request.retries + 1}): {e}")
        raise self.retry(exc=e, countdown=60 * (2 ** self.request.retries))
