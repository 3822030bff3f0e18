#!filepath: circlog/utils/filesystem.py
from pathlib import Path
from typing import List, Optional, Tuple

from circlog.utils.logger import logs


class FileSystem:
    """
    统一文件系统工具
    - 自动创建目录
    - 安全写入文件（临时文件 → replace）
    - 追加写入文本
    - 删除文件
    - 扫描目录（文件名 + 修改时间）
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        """
        创建目录（如果不存在）
        """
        p = Path(path)
        if not p.exists():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] 创建目录: {p}")
        return p

    @staticmethod
    def read_text(path: str | Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    @staticmethod
    def safe_write(path: str | Path, data: bytes) -> None:
        """
        原子写入（避免部分写入导致文件损坏）
        写入步骤：
            1) 先写入 tmp 文件
            2) replace → 正式文件（目标存在时直接覆盖）
        """
        path = Path(path)
        FileSystem.ensure_dir(path.parent)

        tmp_path = path.with_name(path.name + ".tmp")

        try:
            with open(tmp_path, "wb") as f:
                f.write(data)
                logs.debug(f"[FS] 写入临时文件: {tmp_path}")
            tmp_path.replace(path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logs.debug(f"[FS] 原子写入完成: {path}")

    @staticmethod
    def append_text(path: str | Path, text: str) -> None:
        """
        追加写入，文件不存在时创建；句柄只在本次调用内持有
        """
        with open(path, "a", encoding="utf-8") as f:
            f.write(text)

    @staticmethod
    def remove(path: str | Path) -> None:
        """
        删除文件；失败时抛出 OSError，由调用方决定是否容忍
        """
        p = Path(path)
        p.unlink()
        logs.debug(f"[FS] 删除文件: {p}")

    @staticmethod
    def scan_dir(path: str | Path, suffix: Optional[str] = None) -> List[Path]:
        """
        返回目录下所有文件（可按后缀过滤）
        """
        p = Path(path)
        if not p.exists():
            return []

        files = []
        for f in p.iterdir():
            if f.is_file():
                if suffix is None or f.suffix == suffix:
                    files.append(f)

        return sorted(files)

    @staticmethod
    def list_entries(path: str | Path, suffix: Optional[str] = None) -> List[Tuple[str, float]]:
        """
        返回 (文件名, 最后修改时间) 列表；扫描期间被并发删除的文件跳过
        """
        entries = []
        for f in FileSystem.scan_dir(path, suffix=suffix):
            try:
                mtime = f.stat().st_mtime
            except FileNotFoundError:
                logs.debug(f"[FS] 扫描期间文件消失: {f}")
                continue
            entries.append((f.name, mtime))
        return entries
