"""Reminder Routes"""
from __future__ import annotations

import re
from enum import Enum

RES_REMINDERS = "/reminders"
RES_A_REMINDER = "/reminders/{id}"
RES_REMINDER_STATUS = "/reminders/status/{id}"
RES_REMINDER_FLAG = "/reminders/flag/{id}"

PATH_PARAM_ID = "id"


class Operation(str, Enum):
    """ルーティング先の操作"""

    LIST_REMINDERS = "list_reminders"
    GET_REMINDER = "get_reminder"
    CREATE_REMINDER = "create_reminder"
    UPDATE_REMINDER_STATUS = "update_reminder_status"
    UPDATE_REMINDER_FLAG = "update_reminder_flag"
    DELETE_REMINDER = "delete_reminder"
    NOT_SUPPORTED = "not_supported"


DISPATCH_TABLE: dict[tuple[str, str], Operation] = {
    ("GET", RES_REMINDERS): Operation.LIST_REMINDERS,
    ("GET", RES_A_REMINDER): Operation.GET_REMINDER,
    ("POST", RES_REMINDERS): Operation.CREATE_REMINDER,
    ("PUT", RES_REMINDER_STATUS): Operation.UPDATE_REMINDER_STATUS,
    ("PUT", RES_REMINDER_FLAG): Operation.UPDATE_REMINDER_FLAG,
    ("DELETE", RES_A_REMINDER): Operation.DELETE_REMINDER,
}

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _compile_template(template: str) -> re.Pattern[str]:
    pattern = _PLACEHOLDER.sub(r"(?P<\1>[^/]+)", template)
    return re.compile(f"^{pattern}$")


class Router:
    """
    メソッド + リソースパスのディスパッチテーブル

    メソッドとテンプレート化済みのリソースパスの両方が完全一致した場合のみ
    操作を返す。それ以外はすべて NOT_SUPPORTED。
    """

    def __init__(self, prefix: str = ""):
        self.prefix = prefix.rstrip("/")
        templates = sorted({resource for _, resource in DISPATCH_TABLE})
        self._patterns = [(t, _compile_template(t)) for t in templates]

    def resolve(self, method: str, resource: str) -> Operation:
        """(method, resource) を操作に解決"""
        resource = self._strip_prefix(resource)
        if resource is None:
            return Operation.NOT_SUPPORTED
        return DISPATCH_TABLE.get((method.upper(), resource), Operation.NOT_SUPPORTED)

    def match_path(self, path: str) -> tuple[str, dict[str, str]] | None:
        """
        具体的なパスをテンプレートとパスパラメータに解決

        resource テンプレートを持たないイベント（HTTP API, ローカルサーバ）用。
        """
        stripped = self._strip_prefix(path.rstrip("/") or "/")
        if stripped is None:
            return None
        for template, pattern in self._patterns:
            match = pattern.match(stripped)
            if match:
                return self.prefix + template, match.groupdict()
        return None

    def locate(
        self, method: str, resource: str = "", path: str = ""
    ) -> tuple[str, dict[str, str], Operation]:
        """
        リクエストをテンプレート・パスパラメータ・操作に解決

        resource テンプレートがあればそれを使い、無ければ path から解決する。
        """
        if resource:
            return resource, {}, self.resolve(method, resource)
        matched = self.match_path(path)
        if not matched:
            return path, {}, Operation.NOT_SUPPORTED
        template, params = matched
        return template, params, self.resolve(method, template)

    def _strip_prefix(self, resource: str) -> str | None:
        if not self.prefix:
            return resource
        if resource == self.prefix:
            return "/"
        if resource.startswith(self.prefix + "/"):
            return resource[len(self.prefix):]
        return None
