"""DynamoDB Reminder Repository Implementation"""
from __future__ import annotations

from typing import Any, Callable, Iterator

import boto3
import structlog
from boto3.dynamodb.conditions import Key
from botocore.exceptions import BotoCoreError, ClientError

from src.application.ports.repositories import IReminderRepository, PersistenceError
from src.domain.reminder.entities import KEY_SCHEMA, Reminder, ReminderKeySchema

logger = structlog.get_logger()


class DynamoDBReminderRepository(IReminderRepository):
    """
    DynamoDB ベースの Reminder Repository

    単一テーブルに (pk=id, sk=title) の複合キーでリマインダーを保存する。
    Scan / Query は LastEvaluatedKey が返らなくなるまでページを辿り、
    途中のページで失敗した場合は部分結果を返さずに PersistenceError とする。
    """

    def __init__(
        self,
        table_name: str = "Reminders",
        region: str = "us-east-1",
        table: Any = None,
        page_size: int | None = None,
        schema: ReminderKeySchema = KEY_SCHEMA,
    ):
        self.table_name = table_name
        self._schema = schema
        self._page_size = page_size
        if table is None:
            dynamodb = boto3.resource("dynamodb", region_name=region)
            table = dynamodb.Table(table_name)
        self._table = table

    def insert(self, reminder: Reminder) -> None:
        """
        リマインダーを保存

        ID はハンドラ側で採番済みであること。
        """
        log = logger.bind(table=self.table_name, reminder_id=reminder.id)
        log.info("inserting_reminder")

        try:
            self._table.put_item(Item=reminder.to_item(self._schema))
        except (ClientError, BotoCoreError) as e:
            log.error("reminder_insert_failed", error=str(e))
            raise PersistenceError(f"failed to PutItem in DynamoDB: {e}") from e

        log.info("reminder_inserted")

    def read_all(self) -> list[Reminder]:
        """全件 Scan（キー属性のみ射影）"""
        log = logger.bind(table=self.table_name)
        log.info("reading_all_reminders")

        params = {
            "ProjectionExpression": "#pk, #sk",
            "ExpressionAttributeNames": {
                "#pk": self._schema.partition_key,
                "#sk": self._schema.sort_key,
            },
        }
        reminders = self._collect(self._table.scan, params, "scan")

        log.info("all_reminders_read", count=len(reminders))
        return reminders

    def read_by_id(self, reminder_id: str) -> list[Reminder]:
        """
        パーティションキーで Query

        ソートキーが title のため、1つの ID に複数件が返ることがある。
        """
        log = logger.bind(table=self.table_name, reminder_id=reminder_id)
        log.info("reading_reminders_by_id")

        params = {
            "KeyConditionExpression": Key(self._schema.partition_key).eq(reminder_id),
        }
        reminders = self._collect(self._table.query, params, "query")

        log.info("reminders_read_by_id", count=len(reminders))
        return reminders

    def _collect(
        self,
        fetch: Callable[..., dict[str, Any]],
        params: dict[str, Any],
        operation: str,
    ) -> list[Reminder]:
        """全ページのアイテムをページ順に Reminder へ変換"""
        reminders: list[Reminder] = []
        for page in self._pages(fetch, params, operation):
            reminders.extend(
                Reminder.from_item(item, self._schema) for item in page
            )
        return reminders

    def _pages(
        self,
        fetch: Callable[..., dict[str, Any]],
        params: dict[str, Any],
        operation: str,
    ) -> Iterator[list[dict[str, Any]]]:
        """LastEvaluatedKey が無くなるまでページを取得"""
        request = dict(params)
        if self._page_size is not None:
            request["Limit"] = self._page_size

        page_number = 0
        while True:
            try:
                response = fetch(**request)
            except (ClientError, BotoCoreError) as e:
                logger.error(
                    "page_fetch_failed",
                    table=self.table_name,
                    operation=operation,
                    page=page_number,
                    error=str(e),
                )
                raise PersistenceError(f"couldn't {operation}: {e}") from e

            yield response.get("Items", [])
            page_number += 1

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return
            request["ExclusiveStartKey"] = last_key
