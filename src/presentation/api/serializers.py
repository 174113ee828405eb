"""Reminder Wire Serialization"""
from __future__ import annotations

import json
from typing import Any, Iterable

from src.domain.reminder.entities import Reminder


class SerializationError(Exception):
    """ワイヤ形式へのエンコード失敗エラー"""

    pass


def serialize_reminders(reminders: Iterable[Reminder]) -> str:
    """リマインダー一覧を 2 スペースインデントの JSON 配列に変換"""
    try:
        return json.dumps(
            [reminder.to_dict() for reminder in reminders],
            indent=2,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def parse_reminder_body(body: str | None) -> Reminder:
    """
    作成リクエストのボディを解析

    不正な JSON やオブジェクト以外のボディは拒否せず、空の title として扱う。
    クライアントが送った id は常に無視する。
    """
    payload: Any = {}
    if body:
        try:
            payload = json.loads(body)
        except (ValueError, RecursionError):
            payload = {}

    title = _field(payload, "title") if isinstance(payload, dict) else None
    if not isinstance(title, str):
        title = ""
    return Reminder(title=title)


def _field(payload: dict[str, Any], name: str) -> Any:
    """フィールド名の完全一致を優先し、無ければ大文字小文字を無視して探す"""
    if name in payload:
        return payload[name]
    for key, value in payload.items():
        if isinstance(key, str) and key.lower() == name:
            return value
    return None
