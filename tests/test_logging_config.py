"""Configuração de logging"""
import logging

import pytest

from app.core.config import settings
from app.core.logging_config import QUIET_LOGGERS, build_file_handler, resolve_level
from app.tasks.celery_app import configure_worker_logging


@pytest.fixture
def bare_root_logger():
    """Logger raiz sem handlers durante o teste (restaurado no final)"""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.parametrize("name, level", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    ("verbose", logging.INFO),
])
def test_resolve_level(name, level):
    assert resolve_level(name) == level


def test_file_handler_creates_directory(tmp_path):
    log_file = tmp_path / "logs" / "estatisticas.log"
    handler = build_file_handler(str(log_file))
    try:
        assert log_file.parent.is_dir()
        assert handler.encoding == "utf-8"
    finally:
        handler.close()


def test_file_handler_disabled_without_path():
    assert build_file_handler("") is None
    assert build_file_handler(None) is None


def test_worker_logging_writes_to_log_file(tmp_path, monkeypatch, bare_root_logger):
    log_file = tmp_path / "worker.log"
    monkeypatch.setattr(settings, "DEBUG", False)
    monkeypatch.setattr(settings, "LOG_FILE", str(log_file))
    monkeypatch.setattr(settings, "LOG_LEVEL", "info")

    configure_worker_logging()
    logging.getLogger("app.tasks.statistics").info("Recálculo concluído")
    for handler in bare_root_logger.handlers:
        handler.flush()

    assert bare_root_logger.level == logging.INFO
    assert any(isinstance(h, logging.FileHandler) for h in bare_root_logger.handlers)
    content = log_file.read_text(encoding="utf-8")
    assert "Logging configurado (worker, nível INFO)" in content
    assert "app.tasks.statistics - INFO - Recálculo concluído" in content
    assert all(logging.getLogger(name).level == logging.WARNING for name in QUIET_LOGGERS)
