"""Application Context"""
from __future__ import annotations

from dataclasses import dataclass
import structlog

from src.application.ports.repositories import IReminderRepository
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.repositories import DynamoDBReminderRepository
from src.presentation.api.envelope import ApiGatewayRequest, ApiGatewayResponse
from src.presentation.api.reminder_handler import ReminderRequestHandler
from src.presentation.api.router import Router

logger = structlog.get_logger()


@dataclass
class AppConfig:
    env: str
    table_name: str
    aws_region: str


class Application:
    """
    呼び出し単位のアプリケーションコンテキスト

    ストアクライアントは呼び出しごとに構築し、そのリクエスト内でのみ再利用する。
    テストではリポジトリを差し替えて構築できる。
    """

    def __init__(
        self,
        config: AppConfig,
        repository: IReminderRepository,
        router: Router | None = None,
    ):
        self.config = config
        self.repository = repository
        self.router = router or Router()
        self.handler = ReminderRequestHandler(repository, self.router)

    @classmethod
    def create(
        cls,
        stage: str = "",
        settings: Settings | None = None,
        repository: IReminderRepository | None = None,
    ) -> Application:
        """設定からアプリケーションを構築"""
        settings = settings or get_settings()
        config = AppConfig(
            env=stage or settings.environment,
            table_name=settings.table_name,
            aws_region=settings.aws_region,
        )
        if repository is None:
            repository = DynamoDBReminderRepository(
                table_name=config.table_name,
                region=config.aws_region,
                page_size=settings.scan_page_size,
            )
        logger.debug(
            "application_created",
            env=config.env,
            table=config.table_name,
            region=config.aws_region,
        )
        return cls(config, repository, Router(prefix=settings.route_prefix))

    def handle_request(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        return self.handler.handle(request)
