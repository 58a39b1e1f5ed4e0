"""
Respostas condicionais (ETag / If-None-Match).

O fingerprint é calculado sobre os bytes finais do corpo JSON, e esses mesmos
bytes são enviados na resposta 200. Assim um If-None-Match antigo nunca casa
com um payload diferente do que o cliente recebeu.

Uso:
    @router.get("/ranking/{discipline_id}")
    @etag_response
    async def get_ranking(request: Request, discipline_id: int, ...):
        return payload
"""
import hashlib
import inspect
import json
from email.utils import formatdate
from functools import wraps
from typing import Any, Callable, Optional
from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
import logging

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def serialize_payload(payload: Any) -> bytes:
    """Serializa o payload de forma estável (mesmo conteúdo lógico -> mesmos bytes)"""
    return json.dumps(
        jsonable_encoder(payload),
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    ).encode("utf-8")


def fingerprint_bytes(body: bytes) -> str:
    return f'"{hashlib.md5(body).hexdigest()}"'


def compute_fingerprint(payload: Any) -> str:
    """ETag (entre aspas) do payload serializado"""
    return fingerprint_bytes(serialize_payload(payload))


def is_unchanged(if_none_match: Optional[str], payload: Any) -> bool:
    """True somente se o header do cliente for exatamente o ETag atual do payload"""
    if if_none_match is None:
        return False
    return if_none_match == compute_fingerprint(payload)


def conditional_response(request: Request, payload: Any) -> Response:
    """Monta 200 com corpo JSON ou 304 sem corpo, sempre com ETag e Last-Modified"""
    body = serialize_payload(payload)
    etag = fingerprint_bytes(body)
    headers = {
        "ETag": etag,
        # Horário da geração da resposta, não da última alteração dos dados
        "Last-Modified": formatdate(usegmt=True),
    }

    if request.headers.get("if-none-match") == etag:
        logger.debug(f"304 Not Modified: {request.url.path}")
        return Response(status_code=304, headers=headers)

    return Response(content=body, status_code=200, media_type=JSON_MEDIA_TYPE, headers=headers)


def etag_response(func: Callable) -> Callable:
    """
    Decorator que transforma o payload retornado pelo endpoint em resposta
    condicional. O endpoint precisa declarar um parâmetro `request: Request`.
    """
    signature = inspect.signature(func)
    if "request" not in signature.parameters:
        raise TypeError(f"Endpoint {func.__name__} precisa do parâmetro 'request: Request'")

    @wraps(func)
    async def wrapper(*args, **kwargs):
        request = kwargs.get("request")
        if request is None:
            request = signature.bind_partial(*args, **kwargs).arguments["request"]
        payload = await func(*args, **kwargs)
        if isinstance(payload, Response):
            return payload
        return conditional_response(request, payload)

    return wrapper
