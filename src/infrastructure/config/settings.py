"""Application Settings"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    # Service
    service_name: str = "reminders-api"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS
    aws_region: str = "us-east-1"

    # DynamoDB
    table_name: str = "Reminders"
    scan_page_size: Optional[int] = None

    # API Gateway
    route_prefix: str = ""

    # Local server
    local_host: str = "127.0.0.1"
    local_port: int = 8000

    class Config:
        env_prefix = "REMINDERS_"
        env_file = ".env"
        case_sensitive = False

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
