"""Configuração de logging da API e do worker Celery"""
import logging
import sys
from pathlib import Path
from typing import Optional
from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Só interessam quando algo dá errado
QUIET_LOGGERS = (
    "uvicorn.access",
    "sqlalchemy.engine",
    "aiosqlite",
    "asyncpg",
    "celery.app.trace",
)


def resolve_level(name: str) -> int:
    """Nível a partir do nome (case-insensitive); nomes desconhecidos viram INFO"""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def build_file_handler(log_file: Optional[str]) -> Optional[logging.Handler]:
    """Handler UTF-8 para LOG_FILE, criando o diretório se necessário"""
    if not log_file:
        return None
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(component: str = "api"):
    """
    Configura o logger raiz. Em DEBUG loga só no stdout; fora dele também
    grava em LOG_FILE. Usado pela API (no import de app.main) e pelo worker
    Celery (sinal setup_logging).
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if not settings.DEBUG:
        file_handler = build_file_handler(settings.LOG_FILE)
        if file_handler:
            handlers.append(file_handler)

    logging.basicConfig(
        level=resolve_level(settings.LOG_LEVEL),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configurado ({component}, nível {logging.getLevelName(resolve_level(settings.LOG_LEVEL))})")
    return logger
