"""
日志管理模块
根据配置设置根日志器，并提供模块日志器与操作日志上下文
"""

import logging
import sys
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from .config_manager import config_manager, LoggingConfig
from .exceptions import QuoteSystemError, ErrorCodes
from .path_utils import BASE_DIR


class LoggingManager:
    """为根日志器安装控制台与滚动文件处理器"""

    def __init__(self):
        self._config = LoggingConfig()

    @property
    def config(self) -> LoggingConfig:
        return self._config

    def configure(self, config: Optional[LoggingConfig] = None):
        if config:
            self._config = config

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, self._config.level.upper(), logging.INFO))

        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)

        if self._config.console_enabled:
            root_logger.addHandler(self.build_console_handler())
        if self._config.file_enabled:
            root_logger.addHandler(self.build_file_handler())

        for name, level in self._config.modules.items():
            logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    def configure_from_config_file(self) -> LoggingConfig:
        """从配置文件加载日志配置"""
        logging_config = config_manager.get_logging_config()
        try:
            self.configure(logging_config)
        except OSError as e:
            raise QuoteSystemError(
                f"Failed to configure logging from config file: {e}",
                ErrorCodes.CONFIG_INVALID_FORMAT
            ) from e
        return logging_config

    def _formatter(self) -> logging.Formatter:
        return logging.Formatter(self._config.format, datefmt=self._config.date_format)

    def build_console_handler(self) -> logging.Handler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(self._formatter())
        return handler

    def build_file_handler(self) -> logging.Handler:
        """按大小滚动的文件处理器，相对目录以项目根目录为准"""
        log_directory = Path(self._config.file_directory)
        if not log_directory.is_absolute():
            log_directory = BASE_DIR / log_directory
        log_directory.mkdir(parents=True, exist_ok=True)

        handler = RotatingFileHandler(
            filename=log_directory / self._config.file_name,
            maxBytes=self._config.max_bytes_mb * 1024 * 1024,
            backupCount=self._config.backup_count,
            encoding="utf-8"
        )
        handler.setFormatter(self._formatter())
        return handler


class LogContext:
    """记录一次操作的耗时；业务异常交给异常处理器记录，这里只记录未预期的异常"""

    def __init__(self, module: str, operation: str, extra_context: Optional[Dict[str, Any]] = None):
        self.logger = logging.getLogger(module)
        self.label = f"{module}.{operation}"
        self.details = " ".join(f"{key}={value}" for key, value in (extra_context or {}).items())
        self.start_time = None

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time
        if exc_type is None:
            self.logger.debug(f"[{self.label}] completed in {duration:.3f}s {self.details}".rstrip())
        elif issubclass(exc_type, QuoteSystemError):
            self.logger.debug(f"[{self.label}] rejected in {duration:.3f}s: {exc_val}")
        else:
            self.logger.error(f"[{self.label}] failed in {duration:.3f}s {self.details}: {exc_val}")


logging_manager = LoggingManager()
logger = logging.getLogger("quoteservice")

# 模块日志器
api_logger = logging.getLogger("API")
store_logger = logging.getLogger("QuoteStore")
main_logger = logging.getLogger("Main")


def initialize_logging(use_config_file: bool = True) -> bool:
    """初始化日志系统，配置文件不可用时回退到默认配置"""
    if not use_config_file:
        logging_manager.configure()
        return True

    try:
        logging_config = logging_manager.configure_from_config_file()
        logger.info(f"Logging system initialized from config file (level: {logging_config.level})")
    except QuoteSystemError as e:
        print(f"Failed to initialize logging: {e}, falling back to default configuration")
        logging_manager.configure(LoggingConfig())
    return True
