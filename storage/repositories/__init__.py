"""
Storage repositories package.
"""
# 项目内部导包
from .base import BaseRepository
from .mood_entry_repository import MoodEntryRepository
from .usage_counter_repository import UsageCounterRepository

__all__ = [
    "BaseRepository",
    "MoodEntryRepository",
    "UsageCounterRepository",
]
