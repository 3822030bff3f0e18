#!filepath: circlog/__init__.py

from .utils.logger import Logging, logs
from .utils.filesystem import FileSystem
from .utils.clock import CalendarFields, Clock, SystemClock
from .utils.errors import ConfigParseError, LogWriteError
from .config import AppConfig, ConfigStore, Granularity, RotationConfig
from .rotation import CircularLogger, LogFileEntry, RetentionPolicy, RotationState, TimeBucketing

__version__ = "0.1.0"

# alias 简化调用
fs = FileSystem

__all__ = [
    "logs", "Logging",
    "fs", "FileSystem",
    "CalendarFields", "Clock", "SystemClock",
    "ConfigParseError", "LogWriteError",
    "AppConfig", "ConfigStore", "Granularity", "RotationConfig",
    "CircularLogger", "LogFileEntry", "RetentionPolicy", "RotationState", "TimeBucketing",
]
