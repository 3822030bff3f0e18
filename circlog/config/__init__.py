#!filepath: circlog/config/__init__.py
from .log_config import Granularity, RotationConfig
from .config_store import ConfigStore, ConfigReadResult, ReadStatus
from .app_config import AppConfig

__all__ = [
    "Granularity", "RotationConfig",
    "ConfigStore", "ConfigReadResult", "ReadStatus",
    "AppConfig",
]
