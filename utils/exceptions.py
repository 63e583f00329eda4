"""
统一异常定义模块
提供项目特定的异常类和错误处理机制
"""

from typing import Optional, Dict, Any


class QuoteSystemError(Exception):
    """语录服务基础异常类"""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(QuoteSystemError):
    """配置相关错误"""
    pass


class InvalidPayloadError(QuoteSystemError):
    """请求体无法解析为语录"""

    def __init__(self, message: str = "Invalid request body",
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCodes.INVALID_PAYLOAD, context)


class QuoteNotFoundError(QuoteSystemError):
    """指定ID的语录不存在"""

    def __init__(self, quote_id: int, message: str = "Quote not found"):
        super().__init__(message, ErrorCodes.QUOTE_NOT_FOUND, {"quote_id": quote_id})
        self.quote_id = quote_id


# 错误代码常量
class ErrorCodes:
    """错误代码常量"""

    # 配置错误
    CONFIG_INVALID_FORMAT = "CONFIG_001"
    CONFIG_LOAD_ERROR = "CONFIG_002"

    # 请求错误
    INVALID_PAYLOAD = "REQ_001"

    # 存储错误
    QUOTE_NOT_FOUND = "STORE_001"


def create_error_response(error: QuoteSystemError) -> Dict[str, Any]:
    """创建对外的错误响应体"""
    return {"error": error.message}
