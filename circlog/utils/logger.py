#!filepath: circlog/utils/logger.py
import sys
from functools import wraps
from typing import Callable, Optional

from loguru import logger

LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Logging:
    """
    circlog 自身的诊断日志（不是被轮转的业务日志）
    ---------------------------------------
    - import 时不改动任何 handler，消息交给宿主程序已配置的 sink
    - configure() 只增删自己添加的那一个 sink
    - exclusive=True（CLI 独占进程）时才清空全部 handler
    - 包含函数级日志装饰器
    ---------------------------------------
    """

    def __init__(self, log_level: str = "WARNING"):
        self.level = log_level
        self._handler_id: Optional[int] = None

    def configure(self, log_level: Optional[str] = None, exclusive: bool = False) -> int:
        """
        安装（或替换）circlog 的 stderr sink，返回 handler id
        """
        level = (log_level or self.level).upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level: {log_level}")

        if exclusive:
            logger.remove()
        elif self._handler_id is not None:
            logger.remove(self._handler_id)

        self.level = level
        self._handler_id = logger.add(
            sink=lambda msg: sys.stderr.write(msg),
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            backtrace=True,
            diagnose=False,
        )
        return self._handler_id

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(self, msg: str = "Exception occurred") -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                try:
                    return func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

            return wrapper

        return decorator


logs = Logging()
