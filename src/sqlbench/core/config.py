"""
Configuration Management

Centralized configuration management with YAML file support
and environment variable overrides.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()


@dataclass
class DatabaseConfig:
    """Engine options applied to every registered backend."""
    echo: bool = False
    pool_size: int = 5
    sqlite_timeout: int = 20


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/sqlbench.log"
    max_size: str = "10MB"
    backup_count: int = 5


@dataclass
class BackendConfig:
    """A backend to register: URL is built as ``{driver}://{target}``."""
    name: str
    driver: str
    target: str = ""


@dataclass
class WorkloadConfig:
    """A workload to register.

    ``operation`` is either a built-in workload name or a
    ``module:attribute`` reference to a callable.
    """
    name: str
    iterations: int
    operation: Optional[str] = None

    def __post_init__(self):
        if self.operation is None:
            self.operation = self.name


@dataclass
class SuiteConfig:
    """Backends and workloads making up the benchmark matrix."""
    backends: List[BackendConfig] = field(default_factory=list)
    workloads: List[WorkloadConfig] = field(default_factory=list)


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "sqlbench"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    suite: SuiteConfig = field(default_factory=SuiteConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {config_path}"
            )

        # Apply environment variable overrides
        config_data = cls._apply_env_overrides(config_data)

        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app') or {}
            config_data.update(app_config)

        try:
            return cls.from_dict(config_data)
        except TypeError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {str(e)}"
            ) from e

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a plain dictionary."""
        config_data = dict(config_data)

        # Convert nested dictionaries to their corresponding dataclass objects
        if 'database' in config_data and isinstance(config_data['database'], dict):
            config_data['database'] = DatabaseConfig(**config_data['database'])

        if 'logging' in config_data and isinstance(config_data['logging'], dict):
            config_data['logging'] = LoggingConfig(**config_data['logging'])

        if 'suite' in config_data and isinstance(config_data['suite'], dict):
            suite_data = config_data['suite']
            backends = [BackendConfig(**backend) for backend in suite_data.get('backends') or []]
            workloads = [WorkloadConfig(**workload) for workload in suite_data.get('workloads') or []]
            config_data['suite'] = SuiteConfig(backends=backends, workloads=workloads)

        if isinstance(config_data.get('debug'), str):
            config_data['debug'] = _parse_bool(config_data['debug'])

        if isinstance(config_data.get('database'), DatabaseConfig) and isinstance(config_data['database'].echo, str):
            config_data['database'].echo = _parse_bool(config_data['database'].echo)

        return cls(**config_data)

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'LOG_LEVEL': ['logging', 'level'],
            'DEBUG': ['debug'],
            'ENVIRONMENT': ['environment'],
            'SQLBENCH_DB_ECHO': ['database', 'echo'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = env_value

        return config_data


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            # Default configuration path
            config_path = Path("config/default.yaml")

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Use default configuration if file doesn't exist
            _config = AppConfig()

    return _config


def set_config(config: Optional[AppConfig]) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
