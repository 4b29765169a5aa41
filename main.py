"""
Humor Academico 主应用程序

基于FastAPI和Uvicorn的心情目录服务
"""
# 标准库导包
import logging
from contextlib import asynccontextmanager
from typing import Optional

# 第三方库导包
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# 项目内部导包
from config import settings
from storage.database import Database
from routers import basic, moods, stats
from routers.services import MoodCatalogService, UsageStatsService, MoodSyncService

# 配置日志
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)


def build_mood_sync_service(database: Database, strict_labels: bool = False) -> MoodSyncService:
    """
    基于存储客户端组装心情目录、访问统计和同步服务

    Args:
        database: 存储客户端
        strict_labels: 是否只允许预置的心情标签

    Returns:
        MoodSyncService对象
    """
    catalog = MoodCatalogService(database, strict_labels=strict_labels)
    stats_service = UsageStatsService(database)
    return MoodSyncService(catalog, stats_service)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    创建FastAPI应用实例

    Args:
        database: 存储客户端，未提供时根据配置创建

    Returns:
        FastAPI应用
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        应用程序生命周期管理
        """
        db = database or Database.from_settings(settings)
        # 启动时初始化数据库
        try:
            await db.init()
            app.state.database = db
            app.state.mood_sync = build_mood_sync_service(db, strict_labels=settings.MOOD_STRICT_LABELS)
            logger.info("应用程序启动完成")
            yield
        except Exception as e:
            logger.error(f"应用程序启动失败: {str(e)}")
            raise
        finally:
            # 关闭时清理数据库连接
            try:
                await db.dispose()
                logger.info("应用程序关闭完成")
            except Exception as e:
                logger.error(f"应用程序关闭时发生错误: {str(e)}")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Humor Academico mood catalog",
        version=settings.APP_VERSION,
        docs_url=settings.DOCS_URL,
        redoc_url=settings.REDOC_URL,
        openapi_url=settings.OPENAPI_URL,
        lifespan=lifespan
    )

    # 添加CORS中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    # 注册路由
    app.include_router(basic.router)
    app.include_router(moods.router)
    app.include_router(stats.router)

    return app


# 创建FastAPI应用实例
app = create_app()


def main():
    """
    应用程序入口点
    """
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL,
        workers=settings.WORKERS
    )


if __name__ == "__main__":
    main()
