import time
from datetime import datetime, timezone

import pytest

from basetypes.time_value import Resolution, Time


def test_null_time():
    assert Time.from_microseconds(0).is_null()
    assert Time.from_milliseconds(0).is_null()
    assert Time().is_null()
    assert not Time.from_microseconds(1).is_null()


def test_max_time():
    max_time = Time.from_microseconds(2**63 - 1)
    assert max_time.to_microseconds() == 2**63 - 1
    assert max_time == Time.max()


def test_str_of_positive_and_negative_seconds():
    assert str(Time.from_seconds(35.553)) == "35.553.000"
    assert str(Time.from_seconds(-5.553)) == "-5.553.000"


def test_from_seconds_variants():
    assert Time.from_seconds(2).to_microseconds() == 2_000_000
    assert Time.from_seconds(2, 15).to_microseconds() == 2_000_015
    assert Time.from_seconds(1.5).to_microseconds() == 1_500_000
    assert Time.from_seconds(-5.553).to_microseconds() == -5_553_000


def test_unit_conversions():
    t = Time.from_microseconds(1_234_567)
    assert t.to_milliseconds() == 1234
    assert t.to_seconds() == pytest.approx(1.234567)
    assert Time.from_microseconds(-1500).to_milliseconds() == -1


def test_to_time_values_one_day():
    assert Time.from_microseconds(86_400_000_000).to_time_values() == [0, 0, 0, 0, 0, 1]


def test_to_time_values_mixed():
    t = Time.from_microseconds(86_400_000_000 + 3_600_000_000 * 2 + 60_000_000 * 3 + 4_005_006)
    assert t.to_time_values() == [6, 5, 4, 3, 2, 1]


def test_to_timeval_truncates():
    assert Time.from_microseconds(1_500_000).to_timeval() == (1, 500_000)
    assert Time.from_microseconds(-1_500_000).to_timeval() == (-1, -500_000)


def test_arithmetic():
    a = Time.from_milliseconds(3)
    b = Time.from_milliseconds(1)
    assert a + b == Time.from_milliseconds(4)
    assert a - b == Time.from_milliseconds(2)
    assert Time.from_milliseconds(1) * 5 == Time.from_milliseconds(5)
    assert Time.from_microseconds(7) / 2 == Time.from_microseconds(3)
    assert Time.from_microseconds(-7) / 2 == Time.from_microseconds(-3)


def test_comparisons():
    a = Time.from_microseconds(1)
    b = Time.from_microseconds(2)
    assert a < b and b > a
    assert a <= a and a >= a
    assert a != b
    assert sorted([b, a]) == [a, b]


def test_now_and_monotonic_advance():
    first = Time.monotonic()
    time.sleep(0.002)
    assert Time.monotonic() > first
    wall = Time.now().to_seconds()
    assert abs(wall - time.time()) < 5.0


@pytest.mark.parametrize(
    "resolution", [Resolution.SECONDS, Resolution.MILLISECONDS, Resolution.MICROSECONDS]
)
def test_string_round_trip(resolution):
    t = Time.from_microseconds(1_339_675_506_123_456)
    expected = {
        Resolution.SECONDS: Time.from_microseconds(1_339_675_506_000_000),
        Resolution.MILLISECONDS: Time.from_microseconds(1_339_675_506_123_000),
        Resolution.MICROSECONDS: t,
    }[resolution]
    assert Time.from_string(t.to_string(resolution), resolution) == expected


def test_from_string_with_utc_offset():
    base = int(datetime(2012, 6, 14, 12, 5, 6, tzinfo=timezone.utc).timestamp())
    assert Time.from_string("20120614-12:05:06:000100+0000") == Time.from_seconds(base, 100)
    assert Time.from_string("20120614-12:05:06:000100+0230") == Time.from_seconds(base - 9000, 100)
    assert Time.from_string("20120614-12:05:06:001+0000", Resolution.MILLISECONDS) == Time.from_seconds(base, 1000)


def test_from_string_local_matches_time_values():
    parsed = Time.from_string("20120614-12:05:06", Resolution.SECONDS)
    assert parsed == Time.from_time_values(2012, 6, 14, 12, 5, 6, 0, 0)


def test_from_time_values_adds_subseconds():
    whole = Time.from_time_values(2012, 6, 14, 12, 5, 6, 0, 0)
    assert Time.from_time_values(2012, 6, 14, 12, 5, 6, 7, 8) - whole == Time.from_microseconds(7008)


def test_from_string_resolution_mismatch():
    with pytest.raises(ValueError):
        Time.from_string("20120614-12:05:06:001+0000", Resolution.MICROSECONDS)


def test_from_string_format_mismatch():
    with pytest.raises(ValueError):
        Time.from_string("not a time", Resolution.SECONDS)


def test_tz_info_to_seconds():
    assert Time.tz_info_to_seconds("+0230") == -9000
    assert Time.tz_info_to_seconds("-0100") == 3600
    assert Time.tz_info_to_seconds("+0000") == 0


@pytest.mark.parametrize("bad", ["", "+02", "+02300", "abcde"])
def test_tz_info_to_seconds_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        Time.tz_info_to_seconds(bad)


def test_timezone_offset_matches_local_zone():
    when = 1_339_675_506
    offset = Time.timezone_offset(when)
    local = time.localtime(when)
    # mktime may pick a DST flag; the offset stays within a day either way.
    assert abs(offset) <= 86400
    assert abs(offset - local.tm_gmtoff) in (0, 3600)


def test_invalid_resolution_raises():
    with pytest.raises(ValueError):
        Time.from_seconds(1).to_string(5)