"""
MoodEntryRepository - 心情目录Repository
"""
# 标准库导包
from typing import Optional, List

# 第三方库导包
from sqlalchemy.ext.asyncio import AsyncSession

# 项目内部导包
from storage.models.mood_entry import MoodEntry
from storage.repositories.base import BaseRepository


class MoodEntryRepository(BaseRepository[MoodEntry]):
    """心情目录Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, MoodEntry)

    async def get_by_label(self, label: str) -> List[MoodEntry]:
        """
        根据标签获取心情条目（区分大小写的精确匹配）

        Args:
            label: 心情标签

        Returns:
            心情条目列表
        """
        return await self.query_by_filters(filters={"label": label})

    async def label_taken(self, label: str, exclude_id: Optional[str] = None) -> bool:
        """
        检查标签是否已被其他条目使用

        Args:
            label: 心情标签
            exclude_id: 需要排除的条目ID（更新自身时使用）

        Returns:
            是否已被使用
        """
        if exclude_id:
            return await self.exists(label=label, id={"ne": exclude_id})
        return await self.exists(label=label)
