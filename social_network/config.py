# config.py
from pathlib import Path
import logging
from typing import Dict, Any, Union
import yaml

from .utils.error_handler import ConfigurationError

DEFAULT_MAX_USERS = 8
DEFAULT_MAX_NAME_LENGTH = 19
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

class Config:
    def __init__(self, config_path: Union[str, Path]):
        self.config_path = Path(config_path)
        self.config: Dict[str, Any] = self._load_config()

        # Graph configurations
        self.graph_config = self.config.get('graph', {}) or {}
        self.max_users = self._positive_int('max_users', DEFAULT_MAX_USERS)
        self.max_name_length = self._positive_int('max_name_length', DEFAULT_MAX_NAME_LENGTH)

        # Setup logging
        self._setup_logging()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found at {self.config_path}")

        with open(self.config_path, 'r') as f:
            data = yaml.safe_load(f)

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {self.config_path} must contain a mapping",
                'invalid_config',
                {'path': str(self.config_path)}
            )
        return data

    def _positive_int(self, key: str, default: int) -> int:
        value = self.graph_config.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError(
                f"graph.{key} must be a positive integer, got {value!r}",
                'invalid_config',
                {'key': f"graph.{key}", 'value': value}
            )
        return value

    def _log_level(self, log_config: Dict[str, Any]) -> Union[int, str]:
        level = log_config.get('level', 'INFO')
        if isinstance(level, int) and not isinstance(level, bool):
            return level
        if isinstance(level, str) and isinstance(logging.getLevelName(level.upper()), int):
            return level.upper()
        raise ConfigurationError(
            f"logging.level must be a logging level name or number, got {level!r}",
            'invalid_config',
            {'key': 'logging.level', 'value': level}
        )

    def _setup_logging(self):
        """Setup logging configuration based on YAML content."""
        log_config = self.config.get('logging', {}) or {}
        logging.basicConfig(
            level=self._log_level(log_config),
            format=log_config.get('format', DEFAULT_LOG_FORMAT),
            filename=log_config.get('file')
        )
