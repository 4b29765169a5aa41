"""
Utils layer
工具函数层
"""

from .dependencies import get_mood_sync_service, to_http_exception

__all__ = ["get_mood_sync_service", "to_http_exception"]
