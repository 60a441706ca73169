"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dateranger.toml only contains
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from dateranger.domain.moments import TimeUnit

ResolverCodec = Literal["short", "predefined", "relative", "vector"]

# --- dateranger.toml sections ---


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    date_format: str = "%Y-%m-%d %H:%M:%S.%f"
    milliseconds: bool = True


class EnumerateConfig(BaseModel):
    """[enumerate] section."""

    model_config = {"frozen": True}

    default_step: TimeUnit = TimeUnit.DAY
    max_items: int = Field(default=1000, gt=0)

    @field_validator("default_step", mode="before")
    @classmethod
    def _lower_step(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value


class ResolveConfig(BaseModel):
    """[resolve] section."""

    model_config = {"frozen": True}

    order: tuple[ResolverCodec, ...] = ("short", "predefined", "relative", "vector")


class DateRangerConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    output: OutputConfig = Field(default_factory=OutputConfig)
    enumerate: EnumerateConfig = Field(default_factory=EnumerateConfig)
    resolve: ResolveConfig = Field(default_factory=ResolveConfig)
