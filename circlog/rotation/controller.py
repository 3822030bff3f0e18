#!filepath: circlog/rotation/controller.py
from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import Optional

from circlog.config.app_config import AppConfig
from circlog.config.config_store import ConfigStore
from circlog.config.log_config import RotationConfig
from circlog.rotation.bucketing import LOG_SUFFIX, TimeBucketing
from circlog.rotation.retention import RetentionPolicy
from circlog.utils.clock import Clock, SystemClock
from circlog.utils.errors import LogWriteError
from circlog.utils.filesystem import FileSystem
from circlog.utils.logger import logs

LINE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class RotationState:
    current_bucket_id: str = ""
    next_boundary: Optional[datetime] = None

    @property
    def active(self) -> bool:
        return self.next_boundary is not None


class CircularLogger:
    """
    按时间分桶写日志文件，按文件数淘汰最旧文件。

    每次 log() 在锁内完成：
        1) 取当前时间
        2) now >= next_boundary（或尚未初始化）→ 轮转：
           retention 腾位置 → 更新 bucket / boundary
        3) 追加 "YYYY-MM-DD HH:MM:SS - message\\n"

    轮转只看边界时间，不看 bucket 名是否变化：
    hour + frequency=2 时 bucket 名每小时变，但每两小时才轮转一次。
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        log_dir: str | Path | None = None,
        clock: Clock | None = None,
    ):
        if config_path is None or log_dir is None:
            app = AppConfig.from_env()
            config_path = config_path if config_path is not None else app.config_path
            log_dir = log_dir if log_dir is not None else app.log_dir

        self.config_path = Path(config_path)
        self.log_dir = Path(log_dir)
        self.clock = clock or SystemClock()
        self.config: RotationConfig = ConfigStore.load(self.config_path)

        self._state = RotationState()
        self._lock = threading.Lock()

        try:
            FileSystem.ensure_dir(self.log_dir)
        except OSError as e:
            logs.error(f"[CircularLogger] 无法创建日志目录 {self.log_dir}: {e}")

    # ---------------------------------------------------------
    # state
    # ---------------------------------------------------------
    @property
    def state(self) -> RotationState:
        with self._lock:
            return replace(self._state)

    @property
    def current_file(self) -> Optional[Path]:
        with self._lock:
            if not self._state.active:
                return None
            return self.log_dir / (self._state.current_bucket_id + LOG_SUFFIX)

    # ---------------------------------------------------------
    # rotation
    # ---------------------------------------------------------
    def _rotate(self, now: datetime) -> None:
        fields = self.clock.decompose(now)
        bucket_id = TimeBucketing.bucket_id(self.config.granularity, fields)

        removed = RetentionPolicy.apply(
            self.log_dir,
            self.config.max_files,
            incoming=bucket_id + LOG_SUFFIX,
        )

        self._state.current_bucket_id = bucket_id
        self._state.next_boundary = TimeBucketing.next_boundary(
            self.config.granularity, self.config.frequency, fields
        )
        logs.debug(
            f"[CircularLogger] 轮转到 {bucket_id}, 下一个边界 {self._state.next_boundary}, "
            f"删除 {removed}"
        )

    # ---------------------------------------------------------
    # public
    # ---------------------------------------------------------
    def log(self, message: str) -> None:
        with self._lock:
            now = self.clock.now()
            if not self._state.active or now >= self._state.next_boundary:
                self._rotate(now)

            path = self.log_dir / (self._state.current_bucket_id + LOG_SUFFIX)
            stamp = self.clock.decompose(now).strftime(LINE_TIME_FORMAT)

            try:
                FileSystem.ensure_dir(self.log_dir)
                FileSystem.append_text(path, f"{stamp} - {message}\n")
            except OSError as e:
                logs.error(f"[CircularLogger] 写入失败 {path}: {e}")
                raise LogWriteError(f"cannot append to {path}: {e}") from e
