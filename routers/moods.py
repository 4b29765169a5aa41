"""
心情路由
提供心情目录的查询、过滤、创建、更新和删除API接口
"""
# 标准库导包
import logging
from typing import Optional

# 第三方库导包
from fastapi import APIRouter, HTTPException, Depends, Query

# 项目内部导包
from errors import MoodError
from models import (
    MoodEntryCreate,
    MoodEntryUpdate,
    MoodEntryResponse,
    MoodListResponse,
    MoodDetailResponse,
    MoodDeleteResponse
)
from routers.services.mood_sync_service import MoodSyncService
from storage.models.mood_entry import MoodEntry
from utils import get_mood_sync_service, to_http_exception

# 配置日志
logger = logging.getLogger(__name__)

# 创建路由器
router = APIRouter(
    prefix="/moods",
    tags=["心情目录"]
)


def _mood_to_response(entry: MoodEntry) -> MoodEntryResponse:
    """
    将MoodEntry模型转换为MoodEntryResponse

    Args:
        entry: MoodEntry模型实例

    Returns:
        MoodEntryResponse对象
    """
    return MoodEntryResponse(
        id=entry.id,
        label=entry.label,
        phrases=entry.phrases,
        study_tips=entry.study_tips,
        songs=entry.songs,
        colors=entry.colors,
        snacks=entry.snacks,
        emojis=entry.emojis,
        quick_goals=entry.quick_goals,
        rest_ideas=entry.rest_ideas,
        created_at=entry.created_at,
        updated_at=entry.updated_at
    )


@router.get("", response_model=MoodListResponse, summary="获取心情列表")
async def list_moods(sync_service: MoodSyncService = Depends(get_mood_sync_service)):
    """获取所有心情"""
    try:
        entries = await sync_service.list_moods()
        data = [_mood_to_response(entry) for entry in entries]
        return MoodListResponse(data=data, total=len(data))

    except MoodError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"获取心情列表失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"获取心情列表失败: {str(e)}")


# 必须在 /{mood_id} 之前注册，否则 filter 会被当作ID
@router.get("/filter", response_model=MoodListResponse, summary="按标签过滤心情")
async def filter_moods(
    label: Optional[str] = Query(None, description="心情标签，如 cansada"),
    sync_service: MoodSyncService = Depends(get_mood_sync_service)
):
    """按标签过滤心情，没有匹配时返回空列表"""
    try:
        entries = await sync_service.filter_moods(label)
        data = [_mood_to_response(entry) for entry in entries]
        return MoodListResponse(data=data, total=len(data))

    except MoodError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"过滤心情失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"过滤心情失败: {str(e)}")


@router.get("/{mood_id}", response_model=MoodDetailResponse, summary="获取心情详情")
async def get_mood(
    mood_id: str,
    sync_service: MoodSyncService = Depends(get_mood_sync_service)
):
    """
    按ID获取心情

    每次成功获取都会记录一次访问
    """
    try:
        entry = await sync_service.get_mood(mood_id)
        return MoodDetailResponse(data=_mood_to_response(entry))

    except MoodError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"获取心情详情失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"获取心情详情失败: {str(e)}")


@router.post("", response_model=MoodDetailResponse, status_code=201, summary="创建心情")
async def create_mood(
    request: MoodEntryCreate,
    sync_service: MoodSyncService = Depends(get_mood_sync_service)
):
    """创建心情，同时创建访问统计"""
    try:
        entry = await sync_service.create_mood(request)
        return MoodDetailResponse(message="创建成功", data=_mood_to_response(entry))

    except MoodError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"创建心情失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"创建心情失败: {str(e)}")


@router.put("/{mood_id}", response_model=MoodDetailResponse, summary="更新心情")
async def update_mood(
    mood_id: str,
    request: MoodEntryUpdate,
    sync_service: MoodSyncService = Depends(get_mood_sync_service)
):
    """更新心情，标签变化时同步访问统计"""
    try:
        entry = await sync_service.update_mood(mood_id, request)
        return MoodDetailResponse(message="更新成功", data=_mood_to_response(entry))

    except MoodError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"更新心情失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"更新心情失败: {str(e)}")


@router.delete("/{mood_id}", response_model=MoodDeleteResponse, summary="删除心情")
async def delete_mood(
    mood_id: str,
    sync_service: MoodSyncService = Depends(get_mood_sync_service)
):
    """删除心情及其访问统计"""
    try:
        entry = await sync_service.delete_mood(mood_id)
        return MoodDeleteResponse(data=_mood_to_response(entry))

    except MoodError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.error(f"删除心情失败: {str(e)}")
        raise HTTPException(status_code=500, detail=f"删除心情失败: {str(e)}")
