"""Tests for SRT/ASS timestamp conversion."""
import pytest

from core.timing_utils import TimeConverter


class TestSrtTimestamps:

    def test_parses_full_timestamp(self):
        assert TimeConverter.srt_time_to_seconds("01:23:45,678") == pytest.approx(5025.678)

    def test_ignores_surrounding_whitespace(self):
        assert TimeConverter.srt_time_to_seconds("  00:00:02,500 ") == pytest.approx(2.5)

    @pytest.mark.parametrize("text", ["", "garbage", "00:00:01.000", "1:2:3,4"])
    def test_malformed_returns_zero(self, text):
        assert TimeConverter.srt_time_to_seconds(text) == 0.0


class TestAssTimestamps:

    def test_parses_single_digit_hour(self):
        assert TimeConverter.ass_time_to_seconds("1:02:03.45") == pytest.approx(3723.45)

    def test_parses_wide_hour(self):
        assert TimeConverter.ass_time_to_seconds("10:00:00.00") == pytest.approx(36000.0)

    @pytest.mark.parametrize("text", ["", "0:00:01,00", "abc"])
    def test_malformed_returns_zero(self, text):
        assert TimeConverter.ass_time_to_seconds(text) == 0.0


class TestSrtFormatting:

    @pytest.mark.parametrize("seconds,expected", [
        (0, "00:00:00,000"),
        (3661.5, "01:01:01,500"),
        (59.9999, "00:00:59,999"),
        (36000, "10:00:00,000"),
    ])
    def test_formats_with_padding_and_truncation(self, seconds, expected):
        assert TimeConverter.seconds_to_srt_time(seconds) == expected

    def test_negative_clamps_to_zero(self):
        assert TimeConverter.seconds_to_srt_time(-3) == "00:00:00,000"

    @pytest.mark.parametrize("seconds", [0, 1.005, 61, 3661.999])
    def test_round_trip_within_a_millisecond(self, seconds):
        text = TimeConverter.seconds_to_srt_time(seconds)
        recovered = TimeConverter.srt_time_to_seconds(text)
        assert recovered <= seconds + 1e-9
        assert seconds - recovered < 0.0011

    def test_readable_uses_dot(self):
        assert TimeConverter.seconds_to_readable(3825.5) == "01:03:45.500"

    @pytest.mark.parametrize("seconds,expected", [
        (12.34, "12.3s"),
        (125, "2m 5.0s"),
        (3825.5, "1h 3m 45.5s"),
    ])
    def test_format_duration(self, seconds, expected):
        assert TimeConverter.format_duration(seconds) == expected
