"""Task Celery de recálculo"""
import pytest

from app.core.exceptions import StoreError
from app.tasks import statistics as statistics_tasks
from app.tasks.statistics import recalculate_statistics_task


class Retried(Exception):
    pass


def test_recalculation_task_returns_summary(monkeypatch):
    async def fake_recalculate():
        return {"gamesProcessed": 2, "teams": 2, "players": 0}

    monkeypatch.setattr(statistics_tasks, "_recalculate", fake_recalculate)

    assert recalculate_statistics_task() == {
        "status": "success",
        "summary": {"gamesProcessed": 2, "teams": 2, "players": 0},
    }


def test_store_failure_is_retried_with_backoff(monkeypatch):
    retries = []

    async def failing():
        raise StoreError("Erro ao recalcular estatísticas")

    def fake_retry(exc, countdown):
        retries.append((exc, countdown))
        return Retried()

    monkeypatch.setattr(statistics_tasks, "_recalculate", failing)
    monkeypatch.setattr(recalculate_statistics_task, "retry", fake_retry)

    with pytest.raises(Retried):
        recalculate_statistics_task()

    exc, countdown = retries[0]
    assert isinstance(exc, StoreError)
    assert countdown == 60
