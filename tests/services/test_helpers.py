"""Tests for shared service helpers."""

from __future__ import annotations

from datetime import datetime

import pytest

from dateranger.domain.daterange import DateRange
from dateranger.domain.moments import MAX_MOMENT, MIN_MOMENT
from dateranger.services._helpers import moment_iso, parse_moment, range_payload


class TestParseMoment:
    def test_iso_date(self) -> None:
        assert parse_moment("2024-02-29") == datetime(2024, 2, 29)

    def test_iso_datetime(self) -> None:
        assert parse_moment(" 2024-05-15T10:30:00 ") == datetime(2024, 5, 15, 10, 30)

    def test_today(self, fixed_now: datetime) -> None:
        assert parse_moment("Today") == datetime(2024, 5, 15)

    def test_relative_name(self, fixed_now: datetime) -> None:
        assert parse_moment("now") == fixed_now
        assert parse_moment("start of next week") == datetime(2024, 5, 19)

    @pytest.mark.parametrize("text", ["yesterday-ish", "", "2024-13-01", "15/05/2024"])
    def test_unrecognized(self, text: str) -> None:
        assert parse_moment(text) is None

    def test_timezone_aware_rejected(self) -> None:
        assert parse_moment("2024-05-15T10:30:00+02:00") is None


class TestPayload:
    def test_moment_iso_milliseconds(self) -> None:
        assert moment_iso(datetime(2024, 5, 15, 10, 30, 45, 123456)) == "2024-05-15T10:30:45.123"

    def test_range_payload(self) -> None:
        payload = range_payload(DateRange(datetime(2024, 1, 1), datetime(2024, 1, 2)))
        assert payload == {
            "start": "2024-01-01T00:00:00.000",
            "end": "2024-01-02T00:00:00.000",
            "short": "2024-01-01_2024-01-02",
            "open_start": False,
            "open_end": False,
            "seconds": 86400.0,
        }

    def test_open_range_payload(self) -> None:
        payload = range_payload(DateRange(MIN_MOMENT, MAX_MOMENT))
        assert payload["open_start"] is True
        assert payload["open_end"] is True
