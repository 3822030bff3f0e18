#!filepath: circlog/config/log_config.py
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from circlog.utils.logger import logs


class Granularity(str, Enum):
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


DEFAULT_GRANULARITY = Granularity.SECOND
DEFAULT_FREQUENCY = 5
DEFAULT_MAX_FILES = 12


class RotationConfig(BaseModel):
    """
    轮转配置（磁盘上使用 camelCase 字段名）
        loggingType : hour / minute / second
        frequency   : 每隔多少个 granularity 单位轮转一次
        maxEntries  : 目录中最多保留的日志文件数
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    granularity: Granularity = Field(DEFAULT_GRANULARITY, alias="loggingType")
    frequency: int = Field(DEFAULT_FREQUENCY, alias="frequency")
    max_files: int = Field(DEFAULT_MAX_FILES, alias="maxEntries")

    @field_validator("granularity", mode="before")
    @classmethod
    def _normalize_granularity(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("frequency", "max_files")
    @classmethod
    def _clamp_positive(cls, v: int, info) -> int:
        if v < 1:
            logs.warning(f"[Config] {info.field_name}={v} 不合法，按 1 处理")
            return 1
        return v

    def to_record(self) -> dict:
        """
        磁盘格式：{"loggingType": ..., "frequency": ..., "maxEntries": ...}
        """
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def defaults(cls) -> "RotationConfig":
        return cls()
