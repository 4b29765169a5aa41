"""
UsageCounterRepository - 心情访问统计Repository
"""
# 标准库导包
import uuid
from datetime import datetime
from typing import Optional, List, Dict, Any

# 第三方库导包
from sqlalchemy import update
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

# 项目内部导包
from storage.database import utc_now
from storage.models.usage_counter import UsageCounter
from storage.repositories.base import BaseRepository


class UsageCounterRepository(BaseRepository[UsageCounter]):
    """心情访问统计Repository"""

    def __init__(self, session: AsyncSession):
        super().__init__(session, UsageCounter)

    def _upsert(self, values: Dict[str, Any], on_conflict: Dict[str, Any]):
        """
        构建单条原子 upsert 语句，冲突目标为 mood_label 唯一索引

        Args:
            values: 插入时的字段值
            on_conflict: 冲突时要更新的字段

        Returns:
            可执行的insert语句
        """
        dialect = self.dialect_name
        if dialect == "mysql":
            return mysql.insert(UsageCounter).values(**values).on_duplicate_key_update(**on_conflict)
        if dialect == "postgresql":
            stmt = postgresql.insert(UsageCounter).values(**values)
        elif dialect == "sqlite":
            stmt = sqlite.insert(UsageCounter).values(**values)
        else:
            raise NotImplementedError(f"不支持的数据库方言: {dialect}")
        return stmt.on_conflict_do_update(index_elements=[UsageCounter.mood_label], set_=on_conflict)

    async def increment(self, mood_label: str, accessed_at: Optional[datetime] = None):
        """
        访问次数加一，不存在时以 access_count=1 创建

        Args:
            mood_label: 心情标签
            accessed_at: 访问时间
        """
        accessed_at = accessed_at or utc_now()
        stmt = self._upsert(
            values={
                "id": str(uuid.uuid4()),
                "mood_label": mood_label,
                "access_count": 1,
                "last_accessed_at": accessed_at,
                "created_at": accessed_at,
                "updated_at": accessed_at,
            },
            on_conflict={
                "access_count": UsageCounter.access_count + 1,
                "last_accessed_at": accessed_at,
                "updated_at": accessed_at,
            }
        )
        await self.session.execute(stmt)

    async def reset(self, mood_label: str):
        """
        创建 access_count=0 的统计记录，已存在时归零

        Args:
            mood_label: 心情标签
        """
        now = utc_now()
        stmt = self._upsert(
            values={
                "id": str(uuid.uuid4()),
                "mood_label": mood_label,
                "access_count": 0,
                "last_accessed_at": None,
                "created_at": now,
                "updated_at": now,
            },
            on_conflict={
                "access_count": 0,
                "last_accessed_at": None,
                "updated_at": now,
            }
        )
        await self.session.execute(stmt)

    async def get_by_label(self, mood_label: str) -> Optional[UsageCounter]:
        """
        根据标签获取统计记录

        Args:
            mood_label: 心情标签

        Returns:
            统计记录或None
        """
        results = await self.query_by_filters(filters={"mood_label": mood_label}, limit=1)
        return results[0] if results else None

    async def rename_label(self, old_label: str, new_label: str) -> bool:
        """
        将统计记录的标签改写为新标签

        新标签下残留的旧统计记录会先被删除，以保证唯一索引。

        Args:
            old_label: 原标签
            new_label: 新标签

        Returns:
            是否有记录被改写
        """
        if old_label == new_label:
            return await self.exists(mood_label=old_label)

        await self.delete_by_filters({"mood_label": new_label})
        result = await self.session.execute(
            update(UsageCounter)
            .where(UsageCounter.mood_label == old_label)
            .values(mood_label=new_label, updated_at=utc_now())
        )
        return result.rowcount > 0

    async def delete_by_label(self, mood_label: str) -> bool:
        """
        删除标签对应的统计记录

        Args:
            mood_label: 心情标签

        Returns:
            是否有记录被删除
        """
        deleted = await self.delete_by_filters({"mood_label": mood_label})
        return deleted > 0

    async def list_by_access_count(self) -> List[UsageCounter]:
        """按访问次数降序获取所有统计记录"""
        return await self.query_by_filters(filters={}, order_by="access_count", order_desc=True)
