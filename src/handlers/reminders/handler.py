"""
Reminders API Lambda Handler

API Gateway からのイベントを受け取り、リマインダーの CRUD を処理する:
- GET    /reminders
- GET    /reminders/{id}
- POST   /reminders
- PUT    /reminders/status/{id}
- PUT    /reminders/flag/{id}
- DELETE /reminders/{id}
"""
from typing import Any

import structlog

from src.infrastructure.config import get_settings
from src.infrastructure.logging import configure_logging
from src.presentation.api.envelope import ApiGatewayRequest, internal_server_error
from src.presentation.application import Application

logger = structlog.get_logger()

configure_logging(get_settings().log_level)


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    request_context = event.get("requestContext") or {}
    stage = request_context.get("stage", "")

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=getattr(context, "aws_request_id", None),
        stage=stage,
    )

    try:
        app = Application.create(stage=stage)
        request = ApiGatewayRequest.from_event(event)
        resource, _, operation = app.router.locate(
            request.method, request.resource, request.path
        )
        logger.info(
            "request_received",
            stage=stage,
            method=request.method,
            resource=resource,
            operation=operation.value,
        )
        response = app.handle_request(request).to_dict()
    except Exception:
        logger.exception("handler_error")
        return internal_server_error("Internal Server Error").to_dict()

    logger.info("request_completed", stage=stage, status_code=response["statusCode"])
    return response
