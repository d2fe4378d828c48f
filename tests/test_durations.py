from datetime import timedelta

import pytest

from telfs.durations import parse_duration, parse_duration_loose, short_age


def test_parse_simple_hours():
    assert parse_duration("24h") == timedelta(hours=24)


def test_parse_compound():
    assert parse_duration("2h30m") == timedelta(hours=2, minutes=30)


def test_parse_zero_forms():
    assert parse_duration("0") == timedelta(0)
    assert parse_duration("-0") == timedelta(0)
    assert parse_duration("0s") == timedelta(0)


def test_fraction_matches_smaller_unit():
    assert parse_duration("1.5h") == parse_duration("90m")
    assert parse_duration(".5s") == parse_duration("500ms")
    assert parse_duration("1.s") == parse_duration("1s")


def test_sub_second_units_agree():
    assert parse_duration("1000ms") == parse_duration("1s")
    assert parse_duration("1000us") == parse_duration("1ms")
    assert parse_duration("1000\u00b5s") == parse_duration("1ms")
    assert parse_duration("1000000ns") == parse_duration("1ms")


def test_sign_handling():
    assert parse_duration("-1h") == -parse_duration("1h")
    assert parse_duration("+1h") == parse_duration("1h")


@pytest.mark.parametrize(
    "text",
    ["", "-", "+", "h", ".", ".h", "10", "1x", "1.2.3h", "1h 30m", "abc", "7d"],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_duration(text)


def test_parse_error_mentions_input():
    with pytest.raises(ValueError, match="unknown unit"):
        parse_duration("5w")
    with pytest.raises(ValueError, match="missing unit"):
        parse_duration("5")


def test_parse_rejects_overflow():
    with pytest.raises(ValueError):
        parse_duration("9999999999999h")


def test_loose_days():
    assert parse_duration_loose("7d") == parse_duration("168h")
    assert parse_duration_loose("7D") == parse_duration_loose("7d")
    assert parse_duration_loose("1.5d") == parse_duration("36h")


def test_loose_passes_through_plain_durations():
    for text in ("24h", "2h30m", "45s"):
        assert parse_duration_loose(text) == parse_duration(text)


@pytest.mark.parametrize("text", ["d", "xd", "", "1dd", "10"])
def test_loose_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_duration_loose(text)


def test_short_age_examples():
    assert short_age(5 * 60) == "5m"
    assert short_age(3 * 3600) == "3h"
    assert short_age(12 * 86400) == "12d"


def test_short_age_boundaries_change_unit():
    assert short_age(59.9).endswith("s")
    assert short_age(60).endswith("m")
    assert short_age(3599).endswith("m")
    assert short_age(3600).endswith("h")
    assert short_age(86399).endswith("h")
    assert short_age(86400).endswith("d")


def test_short_age_accepts_timedelta():
    assert short_age(timedelta(hours=3)) == short_age(3 * 3600)
    assert short_age(parse_duration_loose("12d")) == short_age(12 * 86400)


def test_short_age_truncates():
    assert short_age(parse_duration("1h59m").total_seconds()) == short_age(3600)