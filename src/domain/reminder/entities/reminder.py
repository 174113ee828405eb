"""Reminder Entity"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import uuid4


@dataclass(frozen=True)
class ReminderKeySchema:
    """
    リマインダーテーブルのキースキーマ

    パーティションキーに id、ソートキーに title を割り当てる。
    一意性は (id, title) の組に対してのみ保証されるため、
    同じ id で title の異なるアイテムが複数存在しうる。
    """

    partition_key: str = "pk"
    sort_key: str = "sk"


KEY_SCHEMA = ReminderKeySchema()


@dataclass
class Reminder:
    """リマインダー（ワイヤ表現）"""

    id: str = ""
    title: str = ""

    @classmethod
    def create(cls, title: str) -> Reminder:
        """サーバ側で新しい ID を採番して作成"""
        return cls(id=str(uuid4()), title=title)

    @classmethod
    def from_item(
        cls,
        item: dict[str, Any],
        schema: ReminderKeySchema = KEY_SCHEMA,
    ) -> Reminder:
        """DynamoDB アイテムから復元"""
        return cls(
            id=str(item.get(schema.partition_key, "")),
            title=str(item.get(schema.sort_key, "")),
        )

    def to_item(self, schema: ReminderKeySchema = KEY_SCHEMA) -> dict[str, Any]:
        """DynamoDB アイテムに変換"""
        return {
            schema.partition_key: self.id,
            schema.sort_key: self.title,
        }

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "title": self.title}
