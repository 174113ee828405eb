"""Request Logging Middleware"""
from __future__ import annotations

import time
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.presentation.api.router import Operation, Router

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    ローカルサーバ用のリクエストログ

    Lambda エントリポイントと同じフィールド (request_id, stage, method,
    resource, operation) でログを出力する。resource はルータで解決した
    テンプレートで、解決できないパスは operation=not_supported とする。
    """

    def __init__(self, app: ASGIApp, router: Router, stage: str = ""):
        super().__init__(app)
        self._router = router
        self._stage = stage

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        resource, operation = self._resolve(request.method, request.url.path)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id, stage=self._stage)

        start_time = time.perf_counter()
        logger.info(
            "request_received",
            stage=self._stage,
            method=request.method,
            resource=resource,
            operation=operation.value,
        )

        response = await call_next(request)

        logger.info(
            "request_completed",
            stage=self._stage,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    def _resolve(self, method: str, path: str) -> tuple[str, Operation]:
        resource, _, operation = self._router.locate(method, path=path)
        return resource, operation
