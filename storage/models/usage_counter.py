"""
UsageCounter模型 - 心情访问统计表
"""
# 标准库导包
import uuid
from datetime import datetime
from typing import Optional

# 第三方库导包
from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

# 项目内部导包
from storage.database import Base, utc_now
from storage.models.mood_entry import LabelString


class UsageCounter(Base):
    """心情访问统计表"""

    __tablename__ = "usage_counters"

    # 核心字段
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # 与mood_entries.label按值对应，不是外键；唯一索引是upsert的冲突目标
    mood_label: Mapped[str] = mapped_column(LabelString, nullable=False, unique=True, comment="心情标签")
    access_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0, comment="访问次数")
    last_accessed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True, comment="最近访问时间")

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self):
        return f"<UsageCounter(mood_label={self.mood_label}, access_count={self.access_count})>"
