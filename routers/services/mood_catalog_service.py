"""
心情目录服务类
处理心情条目的查询、过滤、创建、更新和删除，不涉及访问统计
"""
# 标准库导包
import logging
from typing import Any, Dict, List, Type, TypeVar, Union

# 第三方库导包
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

# 项目内部导包
from errors import ConflictError, NotFoundError, ValidationError
from models import MoodEntryCreate, MoodEntryUpdate
from storage.database import Database
from storage.models.mood_entry import MoodEntry
from storage.repositories.mood_entry_repository import MoodEntryRepository

# 配置日志
logger = logging.getLogger(__name__)

# 严格模式下允许的心情标签
RECOGNIZED_MOODS = (
    "cansada", "estressada", "desanimada", "motivada",
    "curiosa", "ansiosa", "confusa", "feliz",
    "procrastinadora", "insegura", "inspirada", "sobrecarregada",
)

PayloadType = TypeVar("PayloadType", bound=BaseModel)


def _validate_payload(
    model: Type[PayloadType],
    fields: Union[PayloadType, Dict[str, Any]]
) -> PayloadType:
    """
    将请求数据校验为指定的模型，校验失败时转换为业务ValidationError

    Args:
        model: pydantic模型类
        fields: 模型实例或原始字典

    Returns:
        校验后的模型实例
    """
    if isinstance(fields, model):
        return fields
    try:
        return model.model_validate(fields)
    except PydanticValidationError as e:
        raise ValidationError(f"心情数据校验失败: {e.error_count()}个错误", errors=e.errors(include_url=False, include_context=False)) from e


class MoodCatalogService:
    """心情目录服务类"""

    def __init__(self, db: Database, strict_labels: bool = False):
        """
        初始化心情目录服务

        Args:
            db: 存储客户端
            strict_labels: 是否只允许预置的心情标签
        """
        self.db = db
        self.strict_labels = strict_labels

    def _check_label_allowed(self, label: str):
        if self.strict_labels and label not in RECOGNIZED_MOODS:
            raise ValidationError(f"不支持的心情标签: {label}")

    async def list_moods(self) -> List[MoodEntry]:
        """获取所有心情条目，不保证顺序"""
        async with self.db.session() as session:
            return await MoodEntryRepository(session).get_all()

    async def get_mood(self, mood_id: str) -> MoodEntry:
        """
        根据ID获取心情条目

        Args:
            mood_id: 心情ID

        Returns:
            心情条目

        Raises:
            NotFoundError: 心情不存在
        """
        async with self.db.session() as session:
            entry = await MoodEntryRepository(session).get_by_id(mood_id)
        if not entry:
            raise NotFoundError(f"心情不存在: {mood_id}")
        return entry

    async def filter_by_label(self, label: str) -> List[MoodEntry]:
        """
        根据标签过滤心情条目，没有匹配时返回空列表

        Args:
            label: 心情标签

        Returns:
            心情条目列表

        Raises:
            ValidationError: 未提供标签
        """
        if not label or not label.strip():
            raise ValidationError("请提供要过滤的心情标签")

        async with self.db.session() as session:
            return await MoodEntryRepository(session).get_by_label(label.strip())

    async def create_mood(self, fields: Union[MoodEntryCreate, Dict[str, Any]]) -> MoodEntry:
        """
        创建心情条目

        标签唯一性在写入前检查，没有唯一索引兜底，并发创建存在很窄的竞争窗口。

        Args:
            fields: 创建请求

        Returns:
            创建的心情条目

        Raises:
            ValidationError: 数据校验失败
            ConflictError: 标签已存在
        """
        payload = _validate_payload(MoodEntryCreate, fields)
        self._check_label_allowed(payload.label)

        async with self.db.session() as session:
            repo = MoodEntryRepository(session)
            if await repo.label_taken(payload.label):
                raise ConflictError(f"心情已存在: {payload.label}")
            entry = await repo.create(**payload.model_dump())

        logger.info(f"创建心情成功: mood_id={entry.id}, label={entry.label}")
        return entry

    async def update_mood(
        self,
        mood_id: str,
        fields: Union[MoodEntryUpdate, Dict[str, Any]]
    ) -> MoodEntry:
        """
        更新心情条目，只修改传入的字段

        Args:
            mood_id: 心情ID
            fields: 更新请求

        Returns:
            更新后的心情条目

        Raises:
            ValidationError: 数据校验失败或没有可更新的字段
            NotFoundError: 心情不存在
            ConflictError: 新标签已被其他心情使用
        """
        payload = _validate_payload(MoodEntryUpdate, fields)
        changes = payload.model_dump(exclude_none=True)
        if not changes:
            raise ValidationError("没有需要更新的字段")
        if "label" in changes:
            self._check_label_allowed(changes["label"])

        async with self.db.session() as session:
            repo = MoodEntryRepository(session)
            existing = await repo.get_by_id(mood_id)
            if not existing:
                raise NotFoundError(f"心情不存在: {mood_id}")

            if "label" in changes and changes["label"] != existing.label:
                if await repo.label_taken(changes["label"], exclude_id=mood_id):
                    raise ConflictError(f"已存在同名心情: {changes['label']}")

            entry = await repo.update_by_id(mood_id, **changes)

        logger.info(f"更新心情成功: mood_id={mood_id}, fields={sorted(changes)}")
        return entry

    async def delete_mood(self, mood_id: str):
        """
        删除心情条目

        Args:
            mood_id: 心情ID

        Raises:
            NotFoundError: 心情不存在
        """
        async with self.db.session() as session:
            deleted = await MoodEntryRepository(session).delete_by_id(mood_id)
        if not deleted:
            raise NotFoundError(f"心情不存在: {mood_id}")
        logger.info(f"删除心情成功: mood_id={mood_id}")
