"""
工具模块包
提供项目所需的通用工具和功能
"""

from .config_manager import config_manager, UnifiedConfigManager, ApiConfig, LoggingConfig
from .exceptions import (
    QuoteSystemError,
    ConfigurationError,
    InvalidPayloadError,
    QuoteNotFoundError,
    ErrorCodes,
    create_error_response,
)
from .logging_manager import (
    LogContext,
    logging_manager,
    logger,
    initialize_logging,
    api_logger,
    store_logger,
    main_logger,
)
from .path_utils import BASE_DIR, CONFIG_DIR

# 版本信息
__version__ = "1.0.0"

__all__ = [
    # 配置管理
    "config_manager",
    "UnifiedConfigManager",
    "ApiConfig",
    "LoggingConfig",

    # 异常处理
    "QuoteSystemError",
    "ConfigurationError",
    "InvalidPayloadError",
    "QuoteNotFoundError",
    "ErrorCodes",
    "create_error_response",

    # 日志工具
    "LogContext",
    "logging_manager",
    "logger",
    "initialize_logging",
    "api_logger",
    "store_logger",
    "main_logger",

    # 路径工具
    "BASE_DIR",
    "CONFIG_DIR",
]
