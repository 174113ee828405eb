"""Health Check Routes"""
from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> dict:
    """ローカルサーバが向いているテーブルとリージョンを返す"""
    application = request.app.state.application
    return {
        "status": "healthy",
        "stage": application.config.env,
        "table": application.config.table_name,
        "region": application.config.aws_region,
        "route_prefix": application.router.prefix,
    }
