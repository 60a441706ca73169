"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from dateranger.config.models import (
    DateRangerConfig,
    EnumerateConfig,
    OutputConfig,
    ResolveConfig,
)
from dateranger.domain.moments import TimeUnit


class TestDefaults:
    def test_root_defaults(self) -> None:
        cfg = DateRangerConfig()
        assert cfg.output == OutputConfig()
        assert cfg.enumerate == EnumerateConfig()
        assert cfg.resolve == ResolveConfig()

    def test_output_defaults(self) -> None:
        assert OutputConfig().date_format == "%Y-%m-%d %H:%M:%S.%f"


class TestEnumerateConfig:
    @pytest.mark.parametrize("value", ["hour", "Hour", "HOUR"])
    def test_step_case_insensitive(self, value: str) -> None:
        assert EnumerateConfig(default_step=value).default_step is TimeUnit.HOUR  # type: ignore[arg-type]

    def test_unknown_step_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EnumerateConfig(default_step="fortnight")  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, -5])
    def test_max_items_positive(self, value: int) -> None:
        with pytest.raises(ValidationError):
            EnumerateConfig(max_items=value)


class TestResolveConfig:
    def test_custom_order(self) -> None:
        cfg = ResolveConfig(order=["relative", "short"])  # type: ignore[arg-type]
        assert cfg.order == ("relative", "short")

    def test_unknown_codec_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResolveConfig(order=["short", "natural-language"])  # type: ignore[arg-type]


class TestFrozen:
    def test_sections_are_frozen(self) -> None:
        cfg = EnumerateConfig()
        with pytest.raises(ValidationError):
            cfg.max_items = 5  # type: ignore[misc]
