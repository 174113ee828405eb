"""Reminder Request Handler"""
from __future__ import annotations

from typing import Callable

import structlog

from src.application.ports.repositories import IReminderRepository, PersistenceError
from src.domain.reminder.entities import Reminder
from src.presentation.api.envelope import (
    ApiGatewayRequest,
    ApiGatewayResponse,
    internal_server_error,
    not_supported,
    ok,
)
from src.presentation.api.router import PATH_PARAM_ID, Operation, Router
from src.presentation.api.serializers import (
    SerializationError,
    parse_reminder_body,
    serialize_reminders,
)

logger = structlog.get_logger()

JSON_CONTENT_TYPE = "application/json"


class ReminderRequestHandler:
    """
    リマインダー API のリクエストハンドラ

    ルータが解決した操作ごとにペイロードを変換し、リポジトリを呼び出して
    結果をレスポンスエンベロープにシリアライズする。
    """

    def __init__(self, repository: IReminderRepository, router: Router | None = None):
        self._repository = repository
        self._router = router or Router()
        self._operations: dict[Operation, Callable[[ApiGatewayRequest], ApiGatewayResponse]] = {
            Operation.LIST_REMINDERS: self.get_reminders,
            Operation.GET_REMINDER: self.get_a_reminder,
            Operation.CREATE_REMINDER: self.post_reminder,
            Operation.UPDATE_REMINDER_STATUS: self.update_reminder_status,
            Operation.UPDATE_REMINDER_FLAG: self.update_reminder_flag,
            Operation.DELETE_REMINDER: self.delete_reminder,
        }

    def handle(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        """リクエストを操作にディスパッチ"""
        resource, params, operation = self._router.locate(
            request.method, request.resource, request.path
        )
        request.resource = resource
        request.path_parameters = {**params, **request.path_parameters}
        log = logger.bind(method=request.method, resource=resource)

        if operation is Operation.NOT_SUPPORTED:
            log.info("route_not_supported")
            return not_supported("Not Supported")

        log.info("route_resolved", operation=operation.value)
        return self._operations[operation](request)

    def get_reminders(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        try:
            reminders = self._repository.read_all()
        except PersistenceError as e:
            return internal_server_error(
                f"failed to query all reminders: {e}", "PERSISTENCE_ERROR"
            )
        return self._serialize(reminders)

    def get_a_reminder(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        """ID で取得（該当なしは 404 ではなく空配列）"""
        reminder_id = request.path_parameters.get(PATH_PARAM_ID, "")
        try:
            reminders = self._repository.read_by_id(reminder_id)
        except PersistenceError as e:
            return internal_server_error(
                f"failed to retrieve a reminder: {e}", "PERSISTENCE_ERROR"
            )
        return self._serialize(reminders)

    def post_reminder(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        """新規作成（ID は常にサーバ側で採番）"""
        reminder = Reminder.create(title=parse_reminder_body(request.body).title)
        try:
            self._repository.insert(reminder)
        except PersistenceError as e:
            return internal_server_error(
                f"failed to create new reminder: {e}", "PERSISTENCE_ERROR"
            )
        return ok("Reminder Insertion Success")

    # 以下はストアに触れない暫定実装

    def delete_reminder(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        return ok("deleteReminder")

    def update_reminder_status(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        return ok("updateReminderStatus")

    def update_reminder_flag(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        return ok("updateReminderFlag")

    def _serialize(self, reminders: list[Reminder]) -> ApiGatewayResponse:
        try:
            body = serialize_reminders(reminders)
        except SerializationError as e:
            logger.error("serialization_failed", error=str(e))
            return internal_server_error(
                f"failed to marshal: {e}", "SERIALIZATION_ERROR"
            )
        return ok(body, content_type=JSON_CONTENT_TYPE)
