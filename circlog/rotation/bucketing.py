#!filepath: circlog/rotation/bucketing.py
from __future__ import annotations

from datetime import datetime

from circlog.config.log_config import Granularity
from circlog.utils.clock import CalendarFields

LOG_SUFFIX = ".log"


class TimeBucketing:
    """
    时间 → (bucket 标识, 下一个轮转边界)，纯函数

        HOUR   : 2025-01-03-10
        MINUTE : 2025-01-03-10-05
        SECOND : 2025-01-03-10-05-42
    """

    _ID_FORMAT = {
        Granularity.HOUR: "%Y-%m-%d-%H",
        Granularity.MINUTE: "%Y-%m-%d-%H-%M",
        Granularity.SECOND: "%Y-%m-%d-%H-%M-%S",
    }

    _UNIT = {
        Granularity.HOUR: "hours",
        Granularity.MINUTE: "minutes",
        Granularity.SECOND: "seconds",
    }

    @classmethod
    def bucket_id(cls, granularity: Granularity, fields: CalendarFields) -> str:
        return fields.strftime(cls._ID_FORMAT[Granularity(granularity)])

    @classmethod
    def file_name(cls, granularity: Granularity, fields: CalendarFields) -> str:
        return cls.bucket_id(granularity, fields) + LOG_SUFFIX

    @classmethod
    def floor(cls, granularity: Granularity, fields: CalendarFields) -> CalendarFields:
        """
        清零比 granularity 更细的字段
        """
        granularity = Granularity(granularity)
        if granularity is Granularity.HOUR:
            return CalendarFields(fields.year, fields.month, fields.day, fields.hour, 0, 0)
        if granularity is Granularity.MINUTE:
            return CalendarFields(fields.year, fields.month, fields.day, fields.hour, fields.minute, 0)
        return fields

    @classmethod
    def next_boundary(
        cls,
        granularity: Granularity,
        frequency: int,
        fields: CalendarFields,
    ) -> datetime:
        """
        floor(fields) + frequency 个单位；字段溢出交给 datetime 归一化
        frequency < 1 按 1 处理，否则边界等于当前时间，每次调用都会轮转
        超出 datetime 范围时取 datetime.max（之后不再轮转）
        """
        granularity = Granularity(granularity)
        frequency = max(1, int(frequency))
        start = cls.floor(granularity, fields)
        try:
            return start.shift(**{cls._UNIT[granularity]: frequency})
        except OverflowError:
            return datetime.max
