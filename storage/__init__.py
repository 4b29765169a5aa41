"""
Storage层包
提供数据库连接、模型和Repository的统一访问接口
"""
# 项目内部导包
from .database import (
    Base,
    Database,
    utc_now
)
from .models import (
    MoodEntry,
    MOOD_CONTENT_FIELDS,
    UsageCounter
)
from .repositories import (
    BaseRepository,
    MoodEntryRepository,
    UsageCounterRepository
)

__all__ = [
    # 数据库连接相关
    "Base",
    "Database",
    "utc_now",

    # 模型相关
    "MoodEntry",
    "MOOD_CONTENT_FIELDS",
    "UsageCounter",

    # Repository相关
    "BaseRepository",
    "MoodEntryRepository",
    "UsageCounterRepository",
]
