#!filepath: tests/rotation/test_bucketing.py
from datetime import datetime

import pytest

from circlog.config.log_config import Granularity
from circlog.rotation.bucketing import TimeBucketing
from circlog.utils.clock import CalendarFields


def at(*args) -> CalendarFields:
    return CalendarFields.from_datetime(datetime(*args))


@pytest.mark.parametrize(
    "granularity, expected",
    [
        (Granularity.HOUR, "2025-01-03-09"),
        (Granularity.MINUTE, "2025-01-03-09-07"),
        (Granularity.SECOND, "2025-01-03-09-07-05"),
    ],
)
def test_bucket_id(granularity, expected):
    fields = at(2025, 1, 3, 9, 7, 5)
    assert TimeBucketing.bucket_id(granularity, fields) == expected
    assert TimeBucketing.file_name(granularity, fields) == expected + ".log"


def test_bucket_id_accepts_plain_string():
    assert TimeBucketing.bucket_id("hour", at(2025, 1, 3, 9, 7, 5)) == "2025-01-03-09"


@pytest.mark.parametrize(
    "granularity, same, different",
    [
        (Granularity.HOUR, (2025, 1, 3, 10, 59, 59), (2025, 1, 3, 11, 0, 0)),
        (Granularity.MINUTE, (2025, 1, 3, 10, 5, 59), (2025, 1, 3, 10, 6, 0)),
        (Granularity.SECOND, (2025, 1, 3, 10, 5, 0, 900_000), (2025, 1, 3, 10, 5, 1)),
    ],
)
def test_same_bucket_iff_same_truncation(granularity, same, different):
    base = TimeBucketing.bucket_id(granularity, at(2025, 1, 3, 10, 5, 0))
    assert TimeBucketing.bucket_id(granularity, at(*same)) == base
    assert TimeBucketing.bucket_id(granularity, at(*different)) != base


def test_same_hour_different_day_is_different_bucket():
    a = TimeBucketing.bucket_id(Granularity.HOUR, at(2025, 1, 3, 10, 0, 0))
    b = TimeBucketing.bucket_id(Granularity.HOUR, at(2025, 1, 4, 10, 0, 0))
    assert a != b


@pytest.mark.parametrize(
    "granularity, frequency, expected",
    [
        (Granularity.HOUR, 2, datetime(2025, 1, 3, 12, 0, 0)),
        (Granularity.MINUTE, 10, datetime(2025, 1, 3, 10, 15, 0)),
        (Granularity.SECOND, 5, datetime(2025, 1, 3, 10, 5, 47)),
    ],
)
def test_next_boundary_from_floor(granularity, frequency, expected):
    fields = at(2025, 1, 3, 10, 5, 42)
    assert TimeBucketing.next_boundary(granularity, frequency, fields) == expected


@pytest.mark.parametrize("granularity", list(Granularity))
@pytest.mark.parametrize("frequency", [1, 2, 7, 60])
def test_boundary_strictly_after_now(granularity, frequency):
    for t in (
        datetime(2025, 1, 3, 0, 0, 0),
        datetime(2025, 1, 3, 10, 59, 59),
        datetime(2025, 12, 31, 23, 59, 59),
    ):
        fields = CalendarFields.from_datetime(t)
        assert TimeBucketing.next_boundary(granularity, frequency, fields) > t


def test_boundary_normalizes_minute_overflow():
    fields = at(2025, 1, 3, 10, 58, 30)
    assert TimeBucketing.next_boundary(Granularity.MINUTE, 7, fields) == datetime(2025, 1, 3, 11, 5, 0)


def test_boundary_rolls_into_next_month():
    fields = at(2025, 2, 28, 23, 30, 0)
    assert TimeBucketing.next_boundary(Granularity.HOUR, 3, fields) == datetime(2025, 3, 1, 2, 0, 0)


def test_zero_frequency_clamped_to_one():
    fields = at(2025, 1, 3, 10, 5, 42)
    assert TimeBucketing.next_boundary(Granularity.SECOND, 0, fields) == datetime(2025, 1, 3, 10, 5, 43)


def test_floor():
    fields = at(2025, 1, 3, 10, 5, 42)
    assert TimeBucketing.floor(Granularity.HOUR, fields) == at(2025, 1, 3, 10, 0, 0)
    assert TimeBucketing.floor(Granularity.MINUTE, fields) == at(2025, 1, 3, 10, 5, 0)
    assert TimeBucketing.floor(Granularity.SECOND, fields) == fields


def test_huge_frequency_caps_at_datetime_max():
    fields = at(2025, 1, 3, 10, 5, 42)
    assert TimeBucketing.next_boundary(Granularity.HOUR, 10**8, fields) == datetime.max
    assert TimeBucketing.next_boundary(Granularity.SECOND, 10**20, fields) == datetime.max
