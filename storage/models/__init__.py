"""
Storage models package.
"""
# 项目内部导包
from .mood_entry import MoodEntry, MOOD_CONTENT_FIELDS, LABEL_MAX_LENGTH
from .usage_counter import UsageCounter

__all__ = [
    "MoodEntry",
    "MOOD_CONTENT_FIELDS",
    "LABEL_MAX_LENGTH",
    "UsageCounter",
]
