"""FastAPI Local Development Server"""
from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, Response

from src.application.ports.repositories import IReminderRepository
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.logging import configure_logging
from src.presentation.api.envelope import ApiGatewayRequest
from src.presentation.api.routes import health_routes
from src.presentation.application import Application
from src.presentation.middleware.logging import LoggingMiddleware

logger = structlog.get_logger()

PROXY_METHODS = ["GET", "POST", "PUT", "DELETE"]


def create_app(
    settings: Settings | None = None,
    repository: IReminderRepository | None = None,
) -> FastAPI:
    """
    FastAPI アプリケーションを作成

    HTTP リクエストを API Gateway と同じリクエストエンベロープに変換し、
    Lambda と同じハンドラで処理する。
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Reminders API",
        description="Local server for the serverless reminders REST API",
        version="1.0.0",
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
    )
    application = Application.create(
        stage=settings.environment,
        settings=settings,
        repository=repository,
    )
    app.state.application = application

    app.add_middleware(
        LoggingMiddleware,
        router=application.router,
        stage=application.config.env,
    )
    app.include_router(health_routes.router, tags=["Health"])

    @app.api_route("/{full_path:path}", methods=PROXY_METHODS, include_in_schema=False)
    async def proxy(request: Request) -> Response:
        raw_body = await request.body()
        api_request = ApiGatewayRequest(
            method=request.method,
            path=request.url.path,
            body=raw_body.decode("utf-8", errors="replace") if raw_body else None,
            stage=application.config.env,
        )
        result = application.handle_request(api_request)
        return Response(
            content=result.body,
            status_code=result.status_code,
            headers=result.headers,
        )

    logger.info(
        "application_starting",
        service=settings.service_name,
        environment=settings.environment,
        table=settings.table_name,
    )
    return app
