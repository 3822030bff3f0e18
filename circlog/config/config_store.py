#!filepath: circlog/config/config_store.py
from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from circlog.config.log_config import RotationConfig
from circlog.utils.errors import ConfigParseError
from circlog.utils.filesystem import FileSystem
from circlog.utils.logger import logs

YAML_SUFFIXES = (".yml", ".yaml")


class ReadStatus(str, Enum):
    OK = "ok"
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class ConfigReadResult:
    status: ReadStatus
    config: Optional[RotationConfig] = None
    reason: Optional[ConfigParseError] = None

    @property
    def ok(self) -> bool:
        return self.status is ReadStatus.OK


class ConfigStore:
    """
    轮转配置的读写
    - read(path)  → ConfigReadResult（不抛异常，只映射预期的失败）
    - load(path)  → RotationConfig（缺失/损坏时写回默认值，自愈）
    - save(path)  → 原子写入，JSON（缩进 4）或 YAML，可手工编辑
    """

    @staticmethod
    def _is_yaml(path: Path) -> bool:
        return path.suffix.lower() in YAML_SUFFIXES

    @classmethod
    def _parse(cls, path: Path, text: str):
        if cls._is_yaml(path):
            return yaml.safe_load(text)
        return json.loads(text)

    @classmethod
    def read(cls, path: str | Path) -> ConfigReadResult:
        path = Path(path)

        try:
            text = FileSystem.read_text(path)
        except FileNotFoundError:
            return ConfigReadResult(ReadStatus.MISSING)
        except (OSError, UnicodeDecodeError) as e:
            return ConfigReadResult(
                ReadStatus.CORRUPT, reason=ConfigParseError(f"cannot read {path}: {e}")
            )

        try:
            raw = cls._parse(path, text)
        except (ValueError, RecursionError, yaml.YAMLError) as e:
            return ConfigReadResult(
                ReadStatus.CORRUPT, reason=ConfigParseError(f"syntax error in {path}: {e}")
            )

        if not isinstance(raw, dict):
            return ConfigReadResult(
                ReadStatus.CORRUPT,
                reason=ConfigParseError(f"{path} must hold a mapping, got {type(raw).__name__}"),
            )

        try:
            config = RotationConfig.model_validate(raw)
        except ValidationError as e:
            return ConfigReadResult(
                ReadStatus.CORRUPT, reason=ConfigParseError(f"invalid values in {path}: {e}")
            )

        return ConfigReadResult(ReadStatus.OK, config=config)

    @classmethod
    def load(cls, path: str | Path) -> RotationConfig:
        result = cls.read(path)
        if result.ok:
            logs.debug(f"[Config] 加载配置: {path} -> {result.config.to_record()}")
            return result.config

        if result.status is ReadStatus.MISSING:
            logs.warning(f"[Config] 配置文件不存在，写入默认值: {path}")
        else:
            logs.warning(f"[Config] 配置文件损坏，覆盖为默认值: {result.reason}")

        config = RotationConfig.defaults()
        try:
            cls.save(path, config)
        except OSError as e:
            logs.error(f"[Config] 默认配置写入失败: {path}: {e}")
        return config

    @classmethod
    def save(cls, path: str | Path, config: RotationConfig) -> None:
        path = Path(path)
        record = config.to_record()

        if cls._is_yaml(path):
            text = yaml.safe_dump(record, sort_keys=False)
        else:
            text = json.dumps(record, indent=4) + "\n"

        FileSystem.safe_write(path, text.encode("utf-8"))
        logs.info(f"[Config] 配置已保存: {path}")
