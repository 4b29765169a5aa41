"""
心情同步服务类
包装心情目录的写操作和按ID访问，保持访问统计与目录一致

访问统计只是目录的派生数据：目录操作成功后再同步统计，
统计同步失败只记录日志，不影响已经完成的目录操作。
"""
# 标准库导包
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

# 项目内部导包
from errors import MoodError
from models import MoodEntryCreate, MoodEntryUpdate
from routers.services.mood_catalog_service import MoodCatalogService
from routers.services.usage_stats_service import UsageStatsService
from storage.models.mood_entry import MoodEntry
from storage.models.usage_counter import UsageCounter

# 配置日志
logger = logging.getLogger(__name__)


class MoodSyncService:
    """心情同步服务类"""

    def __init__(self, catalog: MoodCatalogService, stats: UsageStatsService):
        """
        初始化心情同步服务

        Args:
            catalog: 心情目录服务
            stats: 访问统计服务
        """
        self.catalog = catalog
        self.stats = stats

    async def _sync_stats(self, action: str, func: Callable[..., Awaitable[Any]], *args) -> bool:
        """
        执行一次统计同步，失败时记录日志并继续

        Args:
            action: 操作描述，用于日志
            func: 统计服务方法
            *args: 方法参数

        Returns:
            同步是否成功
        """
        try:
            await func(*args)
            return True
        except MoodError as e:
            logger.warning(f"访问统计同步失败（{action}），目录操作不受影响: {e.message}")
            return False

    async def list_moods(self) -> List[MoodEntry]:
        return await self.catalog.list_moods()

    async def filter_moods(self, label: Optional[str]) -> List[MoodEntry]:
        return await self.catalog.filter_by_label(label)

    async def get_mood(self, mood_id: str) -> MoodEntry:
        """
        按ID获取心情，成功后记录一次访问

        Args:
            mood_id: 心情ID

        Returns:
            心情条目
        """
        entry = await self.catalog.get_mood(mood_id)
        await self._sync_stats("记录访问", self.stats.record_access, entry.label)
        return entry

    async def create_mood(self, fields: Union[MoodEntryCreate, Dict[str, Any]]) -> MoodEntry:
        """
        创建心情，并创建 access_count=0 的统计记录

        Args:
            fields: 创建请求

        Returns:
            创建的心情条目
        """
        entry = await self.catalog.create_mood(fields)
        await self._sync_stats("创建统计", self.stats.ensure_counter, entry.label)
        return entry

    async def update_mood(
        self,
        mood_id: str,
        fields: Union[MoodEntryUpdate, Dict[str, Any]]
    ) -> MoodEntry:
        """
        更新心情，标签变化时把统计记录改写到新标签

        必须在更新前取得旧标签，否则统计记录会失去对应关系。

        Args:
            mood_id: 心情ID
            fields: 更新请求

        Returns:
            更新后的心情条目
        """
        previous = await self.catalog.get_mood(mood_id)
        old_label = previous.label

        entry = await self.catalog.update_mood(mood_id, fields)
        if entry.label != old_label:
            await self._sync_stats("重命名统计", self.stats.rename_counter, old_label, entry.label)
        return entry

    async def delete_mood(self, mood_id: str) -> MoodEntry:
        """
        删除心情及其统计记录

        Args:
            mood_id: 心情ID

        Returns:
            被删除的心情条目
        """
        entry = await self.catalog.get_mood(mood_id)
        await self.catalog.delete_mood(mood_id)
        await self._sync_stats("删除统计", self.stats.delete_counter, entry.label)
        return entry

    async def list_stats(self) -> List[UsageCounter]:
        return await self.stats.list_counters()

    async def get_stats(self, mood_label: str) -> Optional[UsageCounter]:
        return await self.stats.get_counter(mood_label)
