"""
MoodEntry模型 - 心情目录表
"""
# 标准库导包
import uuid
from datetime import datetime

# 第三方库导包
from sqlalchemy import String, DateTime, JSON
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import Mapped, mapped_column

# 项目内部导包
from storage.database import Base, utc_now


# 标签最大长度，与请求模型的校验保持一致
LABEL_MAX_LENGTH = 100

# 标签按区分大小写的精确值匹配；MySQL默认排序规则忽略大小写和重音，改用二进制排序规则
LabelString = String(LABEL_MAX_LENGTH).with_variant(
    mysql.VARCHAR(LABEL_MAX_LENGTH, collation="utf8mb4_bin"), "mysql"
)

# 心情条目的内容列表字段，每个字段至少包含一项
MOOD_CONTENT_FIELDS = (
    "phrases",
    "study_tips",
    "songs",
    "colors",
    "snacks",
    "emojis",
    "quick_goals",
    "rest_ideas",
)


class MoodEntry(Base):
    """心情目录表"""

    __tablename__ = "mood_entries"

    # 核心字段
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # 标签唯一性由应用层在写入前检查，没有唯一索引
    label: Mapped[str] = mapped_column(LabelString, nullable=False, index=True, comment="心情标签")

    # 内容字段
    phrases: Mapped[list] = mapped_column(JSON, nullable=False, comment="鼓励语")
    study_tips: Mapped[list] = mapped_column(JSON, nullable=False, comment="学习建议")
    songs: Mapped[list] = mapped_column(JSON, nullable=False, comment="推荐音乐")
    colors: Mapped[list] = mapped_column(JSON, nullable=False, comment="颜色")
    snacks: Mapped[list] = mapped_column(JSON, nullable=False, comment="零食")
    emojis: Mapped[list] = mapped_column(JSON, nullable=False, comment="表情")
    quick_goals: Mapped[list] = mapped_column(JSON, nullable=False, comment="小目标")
    rest_ideas: Mapped[list] = mapped_column(JSON, nullable=False, comment="休息建议")

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    def __repr__(self):
        return f"<MoodEntry(id={self.id}, label={self.label})>"
