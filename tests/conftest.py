"""Shared test fixtures"""
from __future__ import annotations

from typing import Any

import pytest
from botocore.exceptions import ClientError

from src.domain.reminder.entities import KEY_SCHEMA
from src.infrastructure.repositories import DynamoDBReminderRepository


def _throughput_error(operation: str) -> ClientError:
    return ClientError(
        {
            "Error": {
                "Code": "ProvisionedThroughputExceededException",
                "Message": "Rate of requests exceeds the allowed throughput",
            }
        },
        operation,
    )


class FakeTable:
    """
    インメモリの DynamoDB Table 代替

    put_item / scan / query の Limit・ExclusiveStartKey・LastEvaluatedKey を再現する。
    """

    def __init__(self) -> None:
        self.items: list[dict[str, Any]] = []
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.fail_on: dict[str, int] = {}

    def fail(self, operation: str, on_call: int = 1) -> None:
        """operation の on_call 回目の呼び出しを失敗させる"""
        self.fail_on[operation] = on_call

    def _record(self, operation: str, kwargs: dict[str, Any]) -> None:
        self.calls.append((operation, kwargs))
        count = sum(1 for name, _ in self.calls if name == operation)
        if self.fail_on.get(operation) == count:
            raise _throughput_error(operation)

    def put_item(self, Item: dict[str, Any]) -> dict[str, Any]:
        self._record("PutItem", {"Item": Item})
        key = self._key(Item)
        self.items = [i for i in self.items if self._key(i) != key]
        self.items.append(dict(Item))
        return {}

    def scan(self, **kwargs: Any) -> dict[str, Any]:
        self._record("Scan", kwargs)
        items = self.items
        names = kwargs.get("ExpressionAttributeNames")
        if names:
            attrs = set(names.values())
            items = [{k: v for k, v in i.items() if k in attrs} for i in items]
        return self._page(items, kwargs)

    def query(self, **kwargs: Any) -> dict[str, Any]:
        self._record("Query", kwargs)
        condition = kwargs["KeyConditionExpression"].get_expression()
        key, value = condition["values"]
        items = [i for i in self.items if i.get(key.name) == value]
        return self._page(items, kwargs)

    def _key(self, item: dict[str, Any]) -> tuple[Any, Any]:
        return item.get(KEY_SCHEMA.partition_key), item.get(KEY_SCHEMA.sort_key)

    def _page(self, items: list[dict[str, Any]], kwargs: dict[str, Any]) -> dict[str, Any]:
        start = 0
        start_key = kwargs.get("ExclusiveStartKey")
        if start_key:
            keys = [self._key(i) for i in items]
            start = keys.index(self._key(start_key)) + 1

        limit = kwargs.get("Limit") or len(items)
        page = items[start:start + limit]
        response: dict[str, Any] = {"Items": page, "Count": len(page)}
        if page and start + limit < len(items):
            last = page[-1]
            response["LastEvaluatedKey"] = {
                KEY_SCHEMA.partition_key: last[KEY_SCHEMA.partition_key],
                KEY_SCHEMA.sort_key: last[KEY_SCHEMA.sort_key],
            }
        return response


@pytest.fixture
def fake_table() -> FakeTable:
    return FakeTable()


@pytest.fixture
def repository(fake_table: FakeTable) -> DynamoDBReminderRepository:
    return DynamoDBReminderRepository(table_name="Reminders", table=fake_table)
