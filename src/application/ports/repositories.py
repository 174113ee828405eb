"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.reminder.entities import Reminder


class PersistenceError(Exception):
    """ストアの読み書き・ページング失敗エラー"""

    pass


class IReminderRepository(ABC):
    """
    Reminder Repository Interface

    依存性逆転の原則に従い、ハンドラ層から参照可能な抽象インターフェース。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    いずれの操作も失敗時は PersistenceError を送出し、リトライは行わない。
    """

    @abstractmethod
    def insert(self, reminder: Reminder) -> None:
        """ID 採番済みのリマインダーを保存"""
        pass

    @abstractmethod
    def read_all(self) -> list[Reminder]:
        """全リマインダーを取得（全ページを走査）"""
        pass

    @abstractmethod
    def read_by_id(self, reminder_id: str) -> list[Reminder]:
        """パーティションキーが一致するリマインダーを取得"""
        pass
