"""Reminders API をローカルの HTTP サーバとして立ち上げる。

Lambda と同じハンドラを FastAPI 経由で呼び出すため、DynamoDB の接続先は
REMINDERS_TABLE_NAME / REMINDERS_AWS_REGION で切り替える。
"""

from __future__ import annotations


def main() -> None:
    """設定のホスト・ポートで create_app をファクトリとして起動する。"""

    import uvicorn

    from src.infrastructure.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "src.presentation.main:create_app",
        factory=True,
        host=settings.local_host,
        port=settings.local_port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
