"""Tests for VectorService."""

from __future__ import annotations

from datetime import datetime

import pytest

from dateranger.config.settings import DateRangerSettings
from dateranger.services.vectors import VectorService


@pytest.fixture
def svc(settings: DateRangerSettings, fixed_now: datetime) -> VectorService:
    return VectorService(settings)


class TestParse:
    def test_next_five_days(self, svc: VectorService) -> None:
        result = svc.parse("Next_5_Days")
        assert result.ok
        assert result.data["vector"] == "Next_5_Day"
        assert result.data["direction"] == "Next"
        assert result.data["magnitude"] == 5
        assert result.data["interval"] == "Day"
        assert result.data["start"] == "2024-05-15T10:30:45.123"
        assert result.data["end"] == "2024-05-20T10:30:45.123"
        assert result.meta == {}

    def test_malformed(self, svc: VectorService) -> None:
        result = svc.parse("Next_five_Days")
        assert result.error is not None
        assert result.error.code == "PARSE_FAILED"

    def test_out_of_range(self, svc: VectorService) -> None:
        result = svc.parse("Next_10000_Years")
        assert result.error is not None
        assert result.error.code == "OUT_OF_RANGE"


class TestResolve:
    def test_against_reference(self, svc: VectorService) -> None:
        result = svc.resolve("last_3_hours", "2024-01-01T02:00")
        assert result.ok
        assert result.op == "resolve_vector"
        assert result.data["start"] == "2023-12-31T23:00:00.000"
        assert result.data["end"] == "2024-01-01T02:00:00.000"
        assert result.meta == {"reference": "2024-01-01T02:00:00.000"}

    def test_relative_reference(self, svc: VectorService) -> None:
        result = svc.resolve("Next_1_Week", "start of today")
        assert result.data["short"] == "2024-05-15_2024-05-22"

    def test_bad_reference(self, svc: VectorService) -> None:
        result = svc.resolve("Next_1_Week", "whenever")
        assert result.error is not None
        assert result.error.code == "BAD_MOMENT"
