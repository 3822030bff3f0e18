#!filepath: circlog/rotation/retention.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from circlog.rotation.bucketing import LOG_SUFFIX
from circlog.utils.filesystem import FileSystem
from circlog.utils.logger import logs


@dataclass(frozen=True)
class LogFileEntry:
    name: str
    last_modified: float


class RetentionPolicy:
    """
    按文件数淘汰最旧的日志文件

    规则：在创建新 bucket 文件之前执行，保留最新的 max_files - 1 个，
    新文件写入后总数 ≤ max_files。
    """

    @staticmethod
    def _oldest_first(entries: Iterable[LogFileEntry]) -> List[LogFileEntry]:
        return sorted(entries, key=lambda e: (e.last_modified, e.name))

    @classmethod
    def select(cls, entries: Iterable[LogFileEntry], keep: int) -> List[str]:
        """
        返回需要删除的文件名（最旧的在前），使最新的 keep 个保留下来
        """
        ordered = cls._oldest_first(entries)
        keep = max(0, keep)
        if len(ordered) <= keep:
            return []
        return [e.name for e in ordered[: len(ordered) - keep]]

    @classmethod
    def enforce(
        cls,
        entries: Iterable[LogFileEntry],
        max_files: int,
        incoming: Optional[str] = None,
    ) -> List[str]:
        """
        为即将写入的 incoming 文件腾出一个位置。

        incoming 已存在时不会被删除，它本身占据这个位置，
        所以两种情况下都是保留其余文件中最新的 max_files - 1 个。
        """
        max_files = max(1, max_files)
        others = [e for e in entries if e.name != incoming]
        return cls.select(others, max_files - 1)

    @classmethod
    def scan(cls, directory: str | Path) -> List[LogFileEntry]:
        return [
            LogFileEntry(name, mtime)
            for name, mtime in FileSystem.list_entries(directory, suffix=LOG_SUFFIX)
        ]

    @classmethod
    def delete(cls, directory: str | Path, names: Iterable[str]) -> List[str]:
        """
        尽力删除：单个文件失败只记 warning，不中断
        """
        directory = Path(directory)
        removed = []
        for name in names:
            try:
                FileSystem.remove(directory / name)
            except OSError as e:
                logs.warning(f"[Retention] 删除失败 {name}: {e}")
                continue
            removed.append(name)
        return removed

    @classmethod
    def apply(
        cls,
        directory: str | Path,
        max_files: int,
        incoming: Optional[str] = None,
    ) -> List[str]:
        try:
            existing = cls.scan(directory)
        except OSError as e:
            logs.warning(f"[Retention] 无法扫描目录 {directory}: {e}")
            return []

        victims = cls.enforce(existing, max_files, incoming=incoming)
        if not victims:
            return []
        removed = cls.delete(directory, victims)
        logs.info(f"[Retention] {directory}: 删除 {len(removed)}/{len(victims)} 个旧文件")
        return removed

    @classmethod
    def prune(cls, directory: str | Path, max_files: int) -> List[str]:
        """
        不预留新文件位置，直接保留最新的 max_files 个
        """
        victims = cls.select(cls.scan(directory), max(1, max_files))
        return cls.delete(directory, victims)
