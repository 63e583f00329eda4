"""
配置管理模块
读取 config 目录下的 json 文件，提供类型化的服务配置
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from .exceptions import ConfigurationError, ErrorCodes
from .path_utils import CONFIG_DIR

config_logger = logging.getLogger("Config")


@dataclass
class LoggingConfig:
    """日志配置"""
    level: str = "INFO"
    format: str = "[%(levelname)s][%(asctime)s][%(filename)s:%(lineno)d] - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_enabled: bool = True
    file_enabled: bool = False
    file_directory: str = "log"
    file_name: str = "quotes.log"
    max_bytes_mb: int = 10
    backup_count: int = 5
    # 模块名 -> 日志级别
    modules: Dict[str, str] = field(default_factory=dict)


@dataclass
class ApiConfig:
    """API配置"""
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_requests: bool = True


class UnifiedConfigManager:
    """按文件名顺序合并 config 目录中的 json 配置"""

    def __init__(self, config_dir: Union[str, Path] = CONFIG_DIR):
        self._config_dir = Path(config_dir)
        self._config_data = self._load(self._config_dir)

    @staticmethod
    def _load(config_dir: Path) -> Dict[str, Any]:
        if not config_dir.is_dir():
            config_logger.warning(f"Configuration directory not found: {config_dir}, using defaults")
            return {}

        merged = {}
        for config_file in sorted(config_dir.glob('*.json')):
            try:
                data = json.loads(config_file.read_text(encoding='utf-8'))
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Invalid JSON in configuration file {config_file.name}: {e}",
                    ErrorCodes.CONFIG_INVALID_FORMAT
                ) from e
            except OSError as e:
                raise ConfigurationError(
                    f"Failed to read configuration file {config_file.name}: {e}",
                    ErrorCodes.CONFIG_LOAD_ERROR
                ) from e

            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"Configuration file {config_file.name} must contain a JSON object",
                    ErrorCodes.CONFIG_INVALID_FORMAT
                )
            merged.update(data)

        config_logger.info(f"Configuration loaded from {config_dir}: {sorted(merged)}")
        return merged

    def get_nested(self, path: str, default: Any = None) -> Any:
        """点分隔路径取值，如 'api_config.port'"""
        current = self._config_data
        for key in path.split('.'):
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        return current

    def get_api_config(self) -> ApiConfig:
        """获取API配置，字段类型不对时回退到默认值"""
        data = self.get_nested('api_config', {})
        try:
            return ApiConfig(
                host=str(data.get('host', ApiConfig.host)),
                port=int(data.get('port', ApiConfig.port)),
                reload=bool(data.get('reload', False)),
                cors_origins=list(data.get('cors_origins', ['*'])),
                log_requests=bool(data.get('log_requests', True)),
            )
        except (AttributeError, TypeError, ValueError) as e:
            config_logger.error(f"Failed to parse api config: {e}")
            return ApiConfig()

    def get_logging_config(self) -> LoggingConfig:
        """获取日志配置"""
        data = self.get_nested('logging_config', {})
        defaults = LoggingConfig()
        try:
            file_data = data.get('file_config', {})
            rotation = file_data.get('rotation') or {}
            return LoggingConfig(
                level=data.get('level', defaults.level),
                format=data.get('format', defaults.format),
                date_format=data.get('date_format', defaults.date_format),
                console_enabled=data.get('console_config', {}).get('enabled', True),
                file_enabled=file_data.get('enabled', False),
                file_directory=file_data.get('directory', defaults.file_directory),
                file_name=file_data.get('filename', defaults.file_name),
                max_bytes_mb=int(rotation.get('max_bytes_mb', defaults.max_bytes_mb)),
                backup_count=int(rotation.get('backup_count', defaults.backup_count)),
                modules={name: module.get('level', 'INFO') if module.get('enabled', True) else 'CRITICAL'
                         for name, module in data.get('modules', {}).items()},
            )
        except (AttributeError, TypeError, ValueError) as e:
            config_logger.error(f"Failed to parse logging config: {e}")
            return defaults


config_manager = UnifiedConfigManager()
