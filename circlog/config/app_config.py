#!filepath: circlog/config/app_config.py
import os
from typing import Literal

from dotenv import load_dotenv

from pydantic import BaseModel, field_validator

from circlog.utils.logger import LEVELS, logs

DEFAULT_CONFIG_NAME = "config.json"
DEFAULT_LOG_DIR = "Logs"


class AppConfig(BaseModel):
    """
    进程级设置（不是轮转配置本身）
        config_path : 轮转配置文件路径
        log_dir     : 日志目录（相对当前工作目录）
        diag_level  : circlog 自身诊断日志级别
    """

    config_path: str = DEFAULT_CONFIG_NAME
    log_dir: str = DEFAULT_LOG_DIR
    diag_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("diag_level", mode="before")
    @classmethod
    def _normalize_level(cls, v):
        level = str(v).strip().upper()
        if level not in LEVELS:
            logs.warning(f"[AppConfig] 未知的诊断日志级别 {v!r}，使用 WARNING")
            return "WARNING"
        return level

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "AppConfig":
        """
        加载 .env（存在时）+ 环境变量
            CIRCLOG_CONFIG / CIRCLOG_LOG_DIR / CIRCLOG_DIAG_LEVEL
        已存在的环境变量优先于 .env
        """
        load_dotenv(env_file or os.path.join(os.getcwd(), ".env"))

        raw = {}
        if os.getenv("CIRCLOG_CONFIG"):
            raw["config_path"] = os.getenv("CIRCLOG_CONFIG")
        if os.getenv("CIRCLOG_LOG_DIR"):
            raw["log_dir"] = os.getenv("CIRCLOG_LOG_DIR")
        if os.getenv("CIRCLOG_DIAG_LEVEL"):
            raw["diag_level"] = os.getenv("CIRCLOG_DIAG_LEVEL")
        return cls(**raw)
