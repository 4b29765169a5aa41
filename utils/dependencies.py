"""
路由依赖工具
提供服务注入和业务异常到HTTP异常的转换
"""
# 第三方库导包
from fastapi import HTTPException, Request

# 项目内部导包
from errors import (
    MoodError,
    NotFoundError,
    ValidationError,
    ConflictError,
    StoreUnavailableError
)
from routers.services.mood_sync_service import MoodSyncService

# 业务异常对应的HTTP状态码
_STATUS_CODES = {
    NotFoundError: 404,
    ValidationError: 400,
    ConflictError: 409,
    StoreUnavailableError: 503,
}


async def get_mood_sync_service(request: Request) -> MoodSyncService:
    """
    获取应用启动时创建的心情同步服务

    Args:
        request: 当前请求

    Returns:
        MoodSyncService对象
    """
    return request.app.state.mood_sync


def to_http_exception(error: MoodError) -> HTTPException:
    """
    将业务异常转换为HTTPException

    Args:
        error: 业务异常

    Returns:
        HTTPException对象
    """
    status_code = 500
    for error_type, code in _STATUS_CODES.items():
        if isinstance(error, error_type):
            status_code = code
            break

    detail = error.message
    if isinstance(error, ValidationError) and error.errors:
        detail = {"message": error.message, "errors": error.errors}
    return HTTPException(status_code=status_code, detail=detail)
