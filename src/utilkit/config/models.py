"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, utilkit.toml only contains
overrides. An empty file (or no file) yields the defaults below.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from utilkit.domain.compute import DEFAULT_SQUARE_DELAY
from utilkit.domain.ratings import DEFAULT_MIN_RATING


class RatingsConfig(BaseModel):
    """[ratings] section."""

    model_config = {"frozen": True}

    min_rating: float = DEFAULT_MIN_RATING


class SquareConfig(BaseModel):
    """[square] section."""

    model_config = {"frozen": True}

    delay_seconds: float = Field(default=DEFAULT_SQUARE_DELAY, ge=0)


class UtilkitConfig(BaseModel):
    """Shape of a utilkit.toml file.

    The settings TOML source validates each file against this model before
    merging, so a bad value is reported against the file that holds it.
    Top-level CLI flags in the file are ignored here.
    """

    model_config = {"frozen": True}

    ratings: RatingsConfig = Field(default_factory=RatingsConfig)
    square: SquareConfig = Field(default_factory=SquareConfig)
