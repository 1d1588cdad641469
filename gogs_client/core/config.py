import json
import os
from pathlib import Path
from typing import Any, Dict, Optional
import yarl
from .exceptions import ConfigError
from .utils import merge_dicts

ENV_PREFIX = "GOGS_"

class Config:
    def __init__(self, config_path: Optional[Path] = None):
        self._config: Dict[str, Any] = {}
        self._load_defaults()
        self._load_environment_variables()
        if config_path:
            self.load(config_path)
        self.validate(self._config)

    def _load_defaults(self) -> None:
        """Load default configuration values"""
        self._config = {
            "api": {
                "url": "https://try.gogs.io/api/v1",
                "search_limit": 10
            },
            "logging": {
                "level": "INFO",
                "file": None,
                "console_output": False,
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        }

    def load(self, path: Path) -> None:
        """Load configuration from JSON file"""
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load config from {path}: {str(e)}")
        self.update(file_config)
        self.validate(self._config)

    def save(self, path: Path) -> None:
        """Save configuration to JSON file"""
        with open(path, 'w') as f:
            json.dump(self._config, f, indent=2)

    def _load_environment_variables(self) -> None:
        """Load configuration from environment variables"""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                # GOGS_API_SEARCH_LIMIT -> api.search_limit
                parts = key[len(ENV_PREFIX):].lower().split('_')
                if len(parts) < 2:
                    continue

                if len(parts) > 2:
                    config_key = f"{parts[0]}.{'_'.join(parts[1:])}"
                else:
                    config_key = '.'.join(parts)

                self.set(config_key, self._convert_value(value))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        try:
            value = self._config
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by dot notation key"""
        keys = key.split('.')
        d = self._config
        for k in keys[:-1]:
            if not isinstance(d.get(k), dict):
                d[k] = {}
            d = d[k]
        d[keys[-1]] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with dictionary"""
        self._config = merge_dicts(self._config, config_dict)

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        api_config = config.get("api", {})
        if "url" in api_config:
            url = yarl.URL(str(api_config["url"]))
            if url.scheme not in ("http", "https") or not url.host:
                raise ConfigError(f"api.url must be an absolute http(s) URL: {api_config['url']}")
        if "search_limit" in api_config:
            limit = api_config["search_limit"]
            if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
                raise ConfigError("search_limit must be a positive integer")

    @staticmethod
    def _convert_value(value: str) -> Any:
        """Convert string value to appropriate type"""
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False

        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            return value
