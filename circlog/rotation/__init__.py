#!filepath: circlog/rotation/__init__.py
from .bucketing import TimeBucketing
from .retention import LogFileEntry, RetentionPolicy
from .controller import CircularLogger, RotationState

__all__ = [
    "TimeBucketing",
    "LogFileEntry", "RetentionPolicy",
    "CircularLogger", "RotationState",
]
