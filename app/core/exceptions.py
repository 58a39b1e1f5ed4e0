"""Erros de domínio e handlers HTTP"""
from typing import Any, Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

logger = logging.getLogger(__name__)


class StatisticsError(Exception):
    """Erro base da API de estatísticas"""

    status_code: int = 500
    default_message: str = "Erro interno do servidor"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(StatisticsError):
    """Identificador ou parâmetro malformado / fora do intervalo"""
    status_code = 400
    default_message = "Dados de entrada inválidos"


class AuthenticationError(StatisticsError):
    status_code = 401
    default_message = "Chave de API inválida ou ausente"


class NotFoundError(StatisticsError):
    """Entidade referenciada não existe"""
    status_code = 404
    default_message = "Registro não encontrado"


class StoreError(StatisticsError):
    """Falha no banco de dados (conexão, constraint, etc.)"""
    status_code = 500
    default_message = "Erro interno do banco de dados"


def error_body(message: str, details: Any = None) -> dict:
    body = {"error": message}
    if details is not None:
        body["details"] = details
    return body


async def statistics_error_handler(request: Request, exc: StatisticsError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}", exc_info=exc.__cause__)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.details))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Parâmetros de path/query inválidos viram 400 (não 422)"""
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg"),
        }
        for err in exc.errors()
    ]
    message = "Parâmetros inválidos"
    if details and details[0]["field"]:
        message = f"Parâmetro inválido: {details[0]['field']}"
    return JSONResponse(status_code=400, content=error_body(message, details))


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Erro de banco em {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=error_body(StoreError.default_message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Erro inesperado em {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=error_body(StatisticsError.default_message))


def register_exception_handlers(app: FastAPI) -> None:
    """Registra handlers que renderizam erros como {"error": "..."}"""
    app.add_exception_handler(StatisticsError, statistics_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
