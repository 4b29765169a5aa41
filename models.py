"""
数据模型定义
"""
# 标准库导包
from typing import Optional, List
from datetime import datetime

# 第三方库导包
from pydantic import BaseModel, Field, field_validator

# 项目内部导包
from storage.models.mood_entry import MOOD_CONTENT_FIELDS, LABEL_MAX_LENGTH


def _clean_label(value: Optional[str]) -> Optional[str]:
    """去除标签两端空白，空标签视为无效"""
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("心情标签不能为空")
    return value


def _clean_items(value: Optional[List[str]]) -> Optional[List[str]]:
    """去除每一项两端空白，列表至少包含一项且不允许空白项"""
    if value is None:
        return None
    items = [item.strip() for item in value]
    if not items:
        raise ValueError("至少需要包含一项")
    if any(not item for item in items):
        raise ValueError("不能包含空白项")
    return items


# ========== Mood模块相关模型 ==========

class MoodEntryCreate(BaseModel):
    """创建心情请求模型"""
    label: str = Field(..., max_length=LABEL_MAX_LENGTH, description="心情标签，如 cansada / motivada")
    phrases: List[str] = Field(..., description="鼓励语")
    study_tips: List[str] = Field(..., description="学习建议")
    songs: List[str] = Field(..., description="推荐音乐")
    colors: List[str] = Field(..., description="颜色")
    snacks: List[str] = Field(..., description="零食")
    emojis: List[str] = Field(..., description="表情")
    quick_goals: List[str] = Field(..., description="小目标")
    rest_ideas: List[str] = Field(..., description="休息建议")

    @field_validator("label")
    @classmethod
    def check_label(cls, value):
        return _clean_label(value)

    @field_validator(*MOOD_CONTENT_FIELDS)
    @classmethod
    def check_items(cls, value):
        return _clean_items(value)


class MoodEntryUpdate(BaseModel):
    """更新心情请求模型，仅更新传入的字段"""
    label: Optional[str] = Field(None, max_length=LABEL_MAX_LENGTH, description="心情标签")
    phrases: Optional[List[str]] = None
    study_tips: Optional[List[str]] = None
    songs: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    snacks: Optional[List[str]] = None
    emojis: Optional[List[str]] = None
    quick_goals: Optional[List[str]] = None
    rest_ideas: Optional[List[str]] = None

    @field_validator("label")
    @classmethod
    def check_label(cls, value):
        return _clean_label(value)

    @field_validator(*MOOD_CONTENT_FIELDS)
    @classmethod
    def check_items(cls, value):
        return _clean_items(value)


class MoodEntryResponse(BaseModel):
    """心情响应模型"""
    id: str
    label: str
    phrases: List[str]
    study_tips: List[str]
    songs: List[str]
    colors: List[str]
    snacks: List[str]
    emojis: List[str]
    quick_goals: List[str]
    rest_ideas: List[str]
    created_at: datetime
    updated_at: datetime


class MoodListResponse(BaseModel):
    """心情列表响应模型"""
    success: bool = True
    message: str = "获取成功"
    data: List[MoodEntryResponse]
    total: int


class MoodDetailResponse(BaseModel):
    """心情详情响应模型"""
    success: bool = True
    message: str = "获取成功"
    data: MoodEntryResponse


class MoodDeleteResponse(BaseModel):
    """删除心情响应模型"""
    success: bool = True
    message: str = "心情及统计已删除"
    data: MoodEntryResponse


# ========== Stats模块相关模型 ==========

class UsageCounterResponse(BaseModel):
    """访问统计响应模型"""
    mood_label: str
    access_count: int
    last_accessed_at: Optional[datetime] = None
    updated_at: datetime


class UsageCounterListResponse(BaseModel):
    """访问统计列表响应模型"""
    success: bool = True
    message: str = "获取成功"
    data: List[UsageCounterResponse]
    total: int


class UsageCounterDetailResponse(BaseModel):
    """访问统计详情响应模型"""
    success: bool = True
    message: str = "获取成功"
    data: UsageCounterResponse
