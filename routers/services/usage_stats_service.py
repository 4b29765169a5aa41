"""
访问统计服务类
维护每个心情标签对应的一条访问统计记录
"""
# 标准库导包
import logging
from typing import List, Optional

# 项目内部导包
from storage.database import Database
from storage.models.usage_counter import UsageCounter
from storage.repositories.usage_counter_repository import UsageCounterRepository

# 配置日志
logger = logging.getLogger(__name__)


class UsageStatsService:
    """访问统计服务类"""

    def __init__(self, db: Database):
        """
        初始化访问统计服务

        Args:
            db: 存储客户端
        """
        self.db = db

    async def list_counters(self) -> List[UsageCounter]:
        """获取所有统计记录，按访问次数降序"""
        async with self.db.session() as session:
            return await UsageCounterRepository(session).list_by_access_count()

    async def get_counter(self, mood_label: str) -> Optional[UsageCounter]:
        """获取标签对应的统计记录，不存在时返回None"""
        async with self.db.session() as session:
            return await UsageCounterRepository(session).get_by_label(mood_label)

    async def record_access(self, mood_label: str):
        """
        记录一次访问

        单条 upsert 语句完成加一或创建，并发调用不会丢失计数。

        Args:
            mood_label: 心情标签
        """
        async with self.db.session() as session:
            await UsageCounterRepository(session).increment(mood_label)
        logger.debug(f"记录访问: label={mood_label}")

    async def ensure_counter(self, mood_label: str):
        """
        为新建的心情创建 access_count=0 的统计记录

        Args:
            mood_label: 心情标签
        """
        async with self.db.session() as session:
            await UsageCounterRepository(session).reset(mood_label)
        logger.info(f"创建访问统计: label={mood_label}")

    async def rename_counter(self, old_label: str, new_label: str) -> bool:
        """
        将统计记录从旧标签改写到新标签，旧标签没有统计记录时不做任何操作

        Args:
            old_label: 原标签
            new_label: 新标签

        Returns:
            是否有统计记录被改写
        """
        async with self.db.session() as session:
            renamed = await UsageCounterRepository(session).rename_label(old_label, new_label)

        if renamed:
            logger.info(f"访问统计已重命名: {old_label} -> {new_label}")
        else:
            logger.info(f"未找到需要重命名的访问统计: label={old_label}")
        return renamed

    async def delete_counter(self, mood_label: str) -> bool:
        """
        删除标签对应的统计记录，不存在时不报错

        Args:
            mood_label: 心情标签

        Returns:
            是否有统计记录被删除
        """
        async with self.db.session() as session:
            deleted = await UsageCounterRepository(session).delete_by_label(mood_label)

        if deleted:
            logger.info(f"删除访问统计: label={mood_label}")
        return deleted
