"""
Services layer
业务逻辑层
"""

from .mood_catalog_service import MoodCatalogService, RECOGNIZED_MOODS
from .usage_stats_service import UsageStatsService
from .mood_sync_service import MoodSyncService

__all__ = [
    "MoodCatalogService",
    "RECOGNIZED_MOODS",
    "UsageStatsService",
    "MoodSyncService"
]
