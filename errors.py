"""
业务异常定义
"""
# 标准库导包
from typing import Any, Dict, List, Optional


class MoodError(Exception):
    """心情目录相关异常的基类"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MoodError):
    """ID或过滤条件没有匹配到记录"""
    pass


class ValidationError(MoodError):
    """必填字段缺失、列表为空或标签不在允许范围内"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class ConflictError(MoodError):
    """创建或重命名时标签重复"""
    pass


class StoreUnavailableError(MoodError):
    """存储层调用失败（连接、超时等）"""
    pass
