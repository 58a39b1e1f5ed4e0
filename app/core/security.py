"""Autenticação por API key para ações administrativas"""
import secrets
from typing import Optional
from fastapi import Security
from fastapi.security import APIKeyHeader
from app.core.config import settings
from app.core.exceptions import AuthenticationError
import logging

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name=settings.API_KEY_HEADER, auto_error=False)


async def require_admin_key(api_key: Optional[str] = Security(api_key_header)) -> str:
    """
    Dependency que exige a chave administrativa.
    Uso: dependencies=[Depends(require_admin_key)]
    """
    expected = settings.ADMIN_API_KEY
    if not expected:
        logger.warning("ADMIN_API_KEY não configurada; ações administrativas bloqueadas")
        raise AuthenticationError("Ações administrativas desabilitadas")

    if not api_key or not secrets.compare_digest(api_key, expected):
        raise AuthenticationError()

    return api_key
