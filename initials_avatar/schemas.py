"""
Pydantic models and defaults for the avatar service.
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_FIRST_INITIAL = "N"
DEFAULT_SECOND_INITIAL = "L"
DEFAULT_BACKGROUND_COLOR = "d9d9d9"
DEFAULT_TEXT_COLOR = "000"
DEFAULT_SIZE = 100
DEFAULT_FONT_SIZE_MULTIPLIER = 1
DEFAULT_FONT_WEIGHT = "normal"
DEFAULT_FONT_FAMILY = "sans-serif"

SIZE_MIN, SIZE_MAX = 16, 512
FONT_SIZE_MIN, FONT_SIZE_MAX = 0.5, 1.2

# Empirical ratio between the avatar edge and the glyph size.
FONT_SCALE = 0.64

FONT_WEIGHTS = ("normal", "bold", "bolder", "lighter")
HEX_COLOR_PATTERN = r"^[0-9a-fA-F]{3,6}$"

Number = Union[int, float]

# ---------------------------------------------------------------------------
# Avatar
# ---------------------------------------------------------------------------


class AvatarConfig(BaseModel):
    """Resolved rendering parameters for a single avatar."""

    model_config = ConfigDict(frozen=True)

    first_initial: str = DEFAULT_FIRST_INITIAL
    second_initial: str = DEFAULT_SECOND_INITIAL
    background_color: str = DEFAULT_BACKGROUND_COLOR
    text_color: str = DEFAULT_TEXT_COLOR
    size: Number = DEFAULT_SIZE
    font_size_multiplier: Number = DEFAULT_FONT_SIZE_MULTIPLIER
    font_weight: str = DEFAULT_FONT_WEIGHT
    font_family: str = DEFAULT_FONT_FAMILY

    @computed_field  # type: ignore[prop-decorator]
    @property
    def computed_font_size(self) -> float:
        return self.size * self.font_size_multiplier * FONT_SCALE

    @property
    def initials(self) -> str:
        return f"{self.first_initial}{self.second_initial}"


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""
    status: str = Field(..., description="Service status (ok/error)")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    strict_validation: bool = Field(
        ...,
        description="Whether malformed avatar parameters are rejected"
    )
