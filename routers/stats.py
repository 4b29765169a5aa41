"""
访问统计路由
提供心情访问统计的查询API接口
"""
# 标准库导包
import logging

# 第三方库导包
from fastapi import APIRouter, HTTPException, Depends

# 项目内部导包
from errors import MoodError
from models import (
    UsageCounterResponse,
    UsageCounterListResponse,
    UsageCounterDetailResponse
)
from routers.services.mood_sync_service import MoodSyncService
from storage.models.usage_counter import UsageCounter
from utils import get_mood_sync_service, to_http_exception

# 配置日志
logger = logging.getLogger(__name__)

# 创建路由器
router = APIRouter(
    prefix="/stats",
    tags=["访问统计"]
)


def _counter_to_response(counter: UsageCounter) -> UsageCounterResponse:
    return UsageCounterResponse(
        mood_label=counter.mood_label,
        access_count=counter.access_count,
        last_accessed_at=counter.last_accessed_at,
        updated_at=counter.updated_at
    )


@router.get("", response_model=UsageCounterListResponse, summary="获取访问统计")
async def list_stats(sync_service: MoodSyncService = Depends(get_mood_sync_service)):
    """获取所有访问统计，按访问次数降序"""
    try:
        counters = await sync_service.list_stats()
        data = [_counter_to_response(counter) for counter in counters]
        return UsageCounterListResponse(data=data, total=len(data))

    except MoodError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"获取访问统计失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"获取访问统计失败: {str(e)}")


@router.get("/{mood_label}", response_model=UsageCounterDetailResponse, summary="获取单个心情的访问统计")
async def get_stats(
    mood_label: str,
    sync_service: MoodSyncService = Depends(get_mood_sync_service)
):
    try:
        counter = await sync_service.get_stats(mood_label)
    except MoodError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"获取访问统计失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"获取访问统计失败: {str(e)}")

    if not counter:
        raise HTTPException(status_code=404, detail=f"访问统计不存在: {mood_label}")
    return UsageCounterDetailResponse(data=_counter_to_response(counter))
