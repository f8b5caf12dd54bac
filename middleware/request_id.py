# middleware/request_id.py
"""
Middleware para adicionar Request ID único a cada requisição.

- Gera UUID para cada requisição (ou reaproveita o header X-Request-ID)
- Armazena em request.state e em um ContextVar
- Devolve o header X-Request-ID na response

Uso em outros módulos:
    from middleware.request_id import get_request_id

    request_id = get_request_id()  # None fora de uma requisição
"""

import uuid
import logging
from contextvars import ContextVar
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"

# Tamanho máximo aceito para um request_id externo
MAX_REQUEST_ID_LENGTH = 64

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

logger = logging.getLogger(__name__)


def get_request_id() -> Optional[str]:
    """Retorna o Request ID da requisição atual (None fora de requisição)."""
    return _request_id_ctx.get()


def generate_request_id() -> str:
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware FastAPI para gerenciamento de Request ID.

    Uso:
        app.add_middleware(RequestIDMiddleware)
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        existing_request_id = request.headers.get(REQUEST_ID_HEADER)
        request_id = (existing_request_id or "").strip()[:MAX_REQUEST_ID_LENGTH] or generate_request_id()

        request.state.request_id = request_id
        token = _request_id_ctx.set(request_id)

        try:
            response: Response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception as e:
            # Deixa a exceção propagar para os handlers de erro
            logger.error(f"[{request_id}] Erro durante requisição: {e}")
            raise

        finally:
            _request_id_ctx.reset(token)
