"""Database configuration module."""
# 标准库导包
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

# 第三方库导包
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

# 项目内部导包
from config import Settings
from errors import ConflictError, StoreUnavailableError

# 配置日志
logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def utc_now() -> datetime:
    """当前UTC时间（不带时区，与DateTime列保持一致）"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Database:
    """
    存储客户端

    持有异步引擎和会话工厂，在应用启动时显式创建，并注入到各个服务中。
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        """
        初始化存储客户端

        Args:
            url: 数据库URL
            echo: 是否打印SQL语句
            **engine_kwargs: 传给create_async_engine的其他参数（连接池配置等）
        """
        self.url = url
        self.engine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """根据应用配置创建存储客户端"""
        url = settings.DATABASE_URL
        engine_kwargs = {}
        if not url.startswith("sqlite"):
            engine_kwargs = {
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_CONNECTIONS - settings.DB_POOL_SIZE,
                "pool_recycle": settings.DB_POOL_RECYCLE,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
                "echo_pool": settings.DEBUG,
            }
        logger.info(f"数据库连接URL: {cls._mask_url(url, settings.DB_PASSWORD)}")
        return cls(url, echo=settings.DEBUG, **engine_kwargs)

    @staticmethod
    def _mask_url(url: str, password: Optional[str]) -> str:
        if password and password in url:
            return url.replace(password, '***')
        return url

    async def init(self):
        """初始化数据库，创建所有表"""
        # 导入模型以便注册到Base.metadata
        from storage import models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(f"数据库表初始化失败: {str(e)}")
            raise StoreUnavailableError(f"数据库不可用: {str(e)}") from e
        logger.info("数据库表初始化完成")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        获取数据库会话

        正常退出时提交事务，出现异常时回滚。SQLAlchemy异常会被转换为业务异常：
        IntegrityError -> ConflictError，其他 -> StoreUnavailableError。

        Yields:
            AsyncSession: 数据库会话对象
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except IntegrityError as e:
                logger.error(f"数据库约束冲突: {str(e)}")
                await session.rollback()
                raise ConflictError(f"数据冲突: {str(e.orig)}") from e
            except SQLAlchemyError as e:
                logger.error(f"数据库会话发生错误: {str(e)}")
                await session.rollback()
                raise StoreUnavailableError(f"数据库不可用: {str(e)}") from e
            except Exception:
                await session.rollback()
                raise

    async def dispose(self):
        """清理数据库连接"""
        await self.engine.dispose()
        logger.info("数据库连接已关闭")
