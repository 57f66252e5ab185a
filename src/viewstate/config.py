"""
Configuration Management for viewstate

🔧 Unified Configuration System:
This module provides configuration for the view-model layer, supporting
different environments. Development and testing turn on the debug checks
(property name verification and strict validated-field names) that catch
programming errors early; production leaves them off.
"""

from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
import logging
import os

class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5

@dataclass
class ViewStateConfig:
    """Complete viewstate configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    # Raise UnknownPropertyError when a notification names a missing property
    verify_property_names: bool = False
    # Raise UnknownPropertyError when an unrecognized field is validated
    strict_field_names: bool = False

    # Customer data file used by MemoryCustomerRepository.from_config
    data_file: Optional[str] = None

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'ViewStateConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.verify_property_names = True
            config.strict_field_names = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.debug = True
            config.verify_property_names = True
            config.strict_field_names = True
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.verify_property_names = False
            config.strict_field_names = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ViewStateConfig':
        """Create configuration from dictionary"""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        for key in ("debug", "verify_property_names", "strict_field_names", "data_file"):
            if key in config_dict:
                setattr(config, key, config_dict[key])

        if "logging" in config_dict:
            for key, value in config_dict["logging"].items():
                if hasattr(config.logging, key):
                    setattr(config.logging, key, value)

        return config

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> 'ViewStateConfig':
        """Load configuration from a JSON or YAML file"""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix == '.json':
            import json
            with open(config_path) as f:
                config_dict = json.load(f)
        elif config_path.suffix in ('.yml', '.yaml'):
            import yaml
            with open(config_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    @classmethod
    def from_environment(cls) -> 'ViewStateConfig':
        """Create configuration from environment variables"""
        env_name = os.getenv('VIEWSTATE_ENV', 'development')
        environment = Environment(env_name)

        config = cls.for_environment(environment)

        if os.getenv('VIEWSTATE_DEBUG'):
            debug = os.getenv('VIEWSTATE_DEBUG').lower() == 'true'
            config.debug = debug
            config.verify_property_names = debug
            config.strict_field_names = debug

        if os.getenv('VIEWSTATE_DATA_FILE'):
            config.data_file = os.getenv('VIEWSTATE_DATA_FILE')

        if os.getenv('VIEWSTATE_LOG_LEVEL'):
            config.logging.level = os.getenv('VIEWSTATE_LOG_LEVEL').upper()

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "verify_property_names": self.verify_property_names,
            "strict_field_names": self.strict_field_names,
            "data_file": self.data_file,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file_path": self.logging.file_path,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count
            },
        }

# Global configuration management
_current_config: Optional[ViewStateConfig] = None

def set_config(config: ViewStateConfig):
    """Set the global configuration"""
    global _current_config
    _current_config = config

def get_config() -> ViewStateConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        # Auto-create from environment if not set
        _current_config = ViewStateConfig.from_environment()

    return _current_config

def reset_config():
    """Forget the current configuration; the next get_config() rereads the environment"""
    global _current_config
    _current_config = None

def configure_from_file(config_path: Union[str, Path]) -> ViewStateConfig:
    """Configure viewstate from file"""
    config = ViewStateConfig.from_file(config_path)
    set_config(config)
    return config

def configure_from_dict(config_dict: Dict[str, Any]) -> ViewStateConfig:
    """Configure viewstate from dictionary"""
    config = ViewStateConfig.from_dict(config_dict)
    set_config(config)
    return config

def configure_logging(config: Optional[ViewStateConfig] = None) -> logging.Logger:
    """
    Attach a handler to the package logger according to the logging config.

    Calling this again replaces the handler installed by the previous call.

    Returns:
        The configured ``viewstate`` logger
    """
    config = config or get_config()
    logger = logging.getLogger("viewstate")

    for handler in list(logger.handlers):
        if getattr(handler, "_viewstate_handler", False):
            logger.removeHandler(handler)
            handler.close()

    if config.logging.file_path:
        handler = RotatingFileHandler(
            config.logging.file_path,
            maxBytes=config.logging.max_file_size,
            backupCount=config.logging.backup_count,
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(config.logging.format))
    handler._viewstate_handler = True
    logger.addHandler(handler)
    logger.setLevel(config.logging.level)
    return logger

# Export main components
__all__ = [
    "ViewStateConfig", "Environment", "LoggingConfig",
    "set_config", "get_config", "reset_config",
    "configure_from_file", "configure_from_dict", "configure_logging",
]
