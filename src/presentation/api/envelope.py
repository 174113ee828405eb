"""API Gateway Request / Response Envelopes"""
from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field
from typing import Any

HTTP_OK = 200
HTTP_NOT_FOUND = 404
HTTP_INTERNAL_SERVER_ERROR = 500

DEFAULT_HEADERS = {
    "Content-Type": "text/plain; charset=utf-8",
}


@dataclass
class ApiGatewayRequest:
    """
    受信リクエスト

    REST API (v1) と HTTP API (v2) のどちらのペイロード形式も受け付ける。
    resource が空の場合はルータが path からテンプレートを解決する。
    """

    method: str
    resource: str = ""
    path: str = ""
    path_parameters: dict[str, str] = field(default_factory=dict)
    body: str | None = None
    stage: str = ""

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> ApiGatewayRequest:
        request_context = event.get("requestContext") or {}
        method = event.get("httpMethod") or (
            request_context.get("http", {}).get("method", "")
        )

        resource = event.get("resource") or ""
        route_key = event.get("routeKey") or ""
        if not resource and " " in route_key:
            resource = route_key.split(" ", 1)[1]

        body = event.get("body")
        if body is not None and event.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body).decode("utf-8", errors="replace")
            except (binascii.Error, ValueError):
                body = None

        return cls(
            method=method.upper(),
            resource=resource,
            path=event.get("path") or event.get("rawPath") or "",
            path_parameters=dict(event.get("pathParameters") or {}),
            body=body,
            stage=request_context.get("stage", ""),
        )


@dataclass
class ApiGatewayResponse:
    """API Gateway レスポンス形式"""

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def to_dict(self) -> dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": self.headers,
            "body": self.body,
        }


def create_response(
    status_code: int,
    body: str,
    headers: dict[str, str] | None = None,
) -> ApiGatewayResponse:
    """レスポンスを作成"""
    merged = dict(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    return ApiGatewayResponse(status_code=status_code, body=body, headers=merged)


def ok(body: str, content_type: str | None = None) -> ApiGatewayResponse:
    headers = {"Content-Type": content_type} if content_type else None
    return create_response(HTTP_OK, body, headers)


def not_supported(body: str = "Not Supported") -> ApiGatewayResponse:
    return create_response(HTTP_NOT_FOUND, body, {"X-Error-Code": "NOT_SUPPORTED"})


def internal_server_error(
    body: str, code: str = "INTERNAL_ERROR"
) -> ApiGatewayResponse:
    return create_response(
        HTTP_INTERNAL_SERVER_ERROR, body, {"X-Error-Code": code}
    )
