"""Core modules - configurações principais"""
from app.core.config import settings
from app.core.database import get_db, Base, AsyncSessionLocal
from app.core.etag import compute_fingerprint, conditional_response, etag_response, is_unchanged
from app.core.exceptions import NotFoundError, StatisticsError, StoreError, ValidationError
from app.core.logging_config import setup_logging

__all__ = [
    "settings",
    "get_db",
    "Base",
    "AsyncSessionLocal",
    "compute_fingerprint",
    "conditional_response",
    "etag_response",
    "is_unchanged",
    "NotFoundError",
    "StatisticsError",
    "StoreError",
    "ValidationError",
    "setup_logging",
]
