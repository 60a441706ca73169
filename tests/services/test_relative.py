"""Tests for RelativeService."""

from __future__ import annotations

from datetime import datetime

import pytest

from dateranger.config.settings import DateRangerSettings
from dateranger.services.relative import RelativeService


@pytest.fixture
def svc(settings: DateRangerSettings, fixed_now: datetime) -> RelativeService:
    return RelativeService(settings)


class TestListNames:
    def test_all_names_with_values(self, svc: RelativeService) -> None:
        result = svc.list_names()
        assert result.ok
        items = result.data["items"]
        assert len(items) == 31
        by_name = {item["name"]: item["moment"] for item in items}
        assert by_name["Now"] == "2024-05-15T10:30:45.123"
        assert by_name["Any Time in Past"] == "0001-01-01T00:00:00.000"


class TestResolve:
    def test_case_insensitive(self, svc: RelativeService) -> None:
        result = svc.resolve("end of this week")
        assert result.ok
        assert result.data == {"name": "End of This Week", "moment": "2024-05-18T23:59:59.999"}

    def test_unknown(self, svc: RelativeService) -> None:
        result = svc.resolve("fortnight ago")
        assert result.error is not None
        assert result.error.code == "UNKNOWN_NAME"
        assert "Now" in result.error.detail["available"]


class TestResolveRange:
    def test_fourteen_days(self, svc: RelativeService) -> None:
        result = svc.resolve_range("14 Days Ago_Now")
        assert result.ok
        assert result.data["relative"] == "14 Days Ago_Now"
        assert result.data["seconds"] == 14 * 86400
        assert result.data["end"] == "2024-05-15T10:30:45.123"

    def test_reordered(self, svc: RelativeService) -> None:
        result = svc.resolve_range("now_start of this month")
        assert result.data["start_name"] == "Start of This Month"
        assert result.data["end_name"] == "Now"
        assert result.data["relative"] == "Start of This Month_Now"

    def test_parse_failure(self, svc: RelativeService) -> None:
        result = svc.resolve_range("Now")
        assert result.error is not None
        assert result.error.code == "PARSE_FAILED"
