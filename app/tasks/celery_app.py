"""Configuração do Celery"""
from celery import Celery
from celery.schedules import crontab
from celery.signals import setup_logging as celery_setup_logging
from app.core.config import settings
from app.core.logging_config import setup_logging

celery_app = Celery(
    'estatisticas',
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend
)

celery_app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone='UTC',
    enable_utc=True,
    task_track_started=True,
    task_time_limit=3600,
    worker_max_tasks_per_child=50,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
)

# Importa as tasks para registro no worker
from app.tasks import statistics  # noqa: E402,F401

celery_app.conf.beat_schedule = {
    # Reconstrução completa diária, de madrugada
    'nightly-statistics-recalculation': {
        'task': 'app.tasks.statistics.recalculate_statistics_task',
        'schedule': crontab(minute=0, hour=4),
    },
}


@celery_setup_logging.connect
def configure_worker_logging(**kwargs):
    """Worker usa o mesmo formato e arquivo de log da API"""
    setup_logging(component="worker")
