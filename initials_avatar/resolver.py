"""
Query parameter resolution for avatar requests.

Turns the raw query-string mapping into an ``AvatarConfig``.  Missing or
malformed values fall back to their defaults; out-of-range numbers reset to
the default rather than being clamped to the nearest bound.

With ``strict=True`` malformed values raise ``InvalidAvatarParameter``
instead of being defaulted.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping, Optional

from .schemas import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_FIRST_INITIAL,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE_MULTIPLIER,
    DEFAULT_FONT_WEIGHT,
    DEFAULT_SECOND_INITIAL,
    DEFAULT_SIZE,
    DEFAULT_TEXT_COLOR,
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    FONT_WEIGHTS,
    HEX_COLOR_PATTERN,
    SIZE_MAX,
    SIZE_MIN,
    AvatarConfig,
    Number,
)

_log = logging.getLogger(__name__)

# Plain decimal notation with optional exponent; rejects "nan", "inf" and "1_0".
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_HEX_COLOR_RE = re.compile(HEX_COLOR_PATTERN)


class InvalidAvatarParameter(ValueError):
    """Raised in strict mode when a query parameter is malformed."""

    def __init__(self, param: str, message: str) -> None:
        super().__init__(message)
        self.param = param


def _present(params: Mapping[str, str], key: str) -> Optional[str]:
    """Return the parameter value, treating empty strings as absent."""
    value = params.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def parse_number(raw: str) -> Optional[Number]:
    """Parse a decimal string, returning ``None`` when it is not a number.

    Integral values come back as ``int`` so they render without a trailing
    ``.0``.
    """
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    if value.is_integer():
        return int(value)
    return value


def _resolve_number(
    params: Mapping[str, str],
    key: str,
    default: Number,
    low: Number,
    high: Number,
    strict: bool,
) -> Number:
    raw = _present(params, key)
    if raw is None:
        return default
    value = parse_number(raw)
    if value is not None and low <= value <= high:
        return value
    if strict:
        raise InvalidAvatarParameter(
            key, f"{key} must be a number between {low} and {high}, got {raw!r}"
        )
    return default


def _resolve_color(params: Mapping[str, str], key: str, default: str, strict: bool) -> str:
    raw = _present(params, key)
    if raw is None:
        return default
    if strict and not _HEX_COLOR_RE.fullmatch(raw):
        raise InvalidAvatarParameter(
            key, f"{key} must be 3 to 6 hex digits without '#', got {raw!r}"
        )
    return raw


def resolve_initials(name: Optional[str], lastname: Optional[str]) -> tuple[str, str]:
    """Derive the two upper-cased initials from the name fields.

    The last name wins for the second initial; without one, the second
    character of the first name is used when there is one.
    """
    first = name[0].upper() if name else DEFAULT_FIRST_INITIAL
    if lastname:
        second = lastname[0].upper()
    elif name and len(name) > 1:
        second = name[1].upper()
    else:
        second = DEFAULT_SECOND_INITIAL
    return first, second


def resolve_avatar_config(params: Mapping[str, str], strict: bool = False) -> AvatarConfig:
    """Build an ``AvatarConfig`` from raw query parameters."""
    first, second = resolve_initials(_present(params, "name"), _present(params, "lastname"))

    font_weight = _present(params, "fontWeight") or DEFAULT_FONT_WEIGHT
    if strict and font_weight not in FONT_WEIGHTS:
        raise InvalidAvatarParameter(
            "fontWeight",
            f"fontWeight must be one of {', '.join(FONT_WEIGHTS)}, got {font_weight!r}",
        )

    config = AvatarConfig(
        first_initial=first,
        second_initial=second,
        background_color=_resolve_color(
            params, "backgroundColor", DEFAULT_BACKGROUND_COLOR, strict
        ),
        text_color=_resolve_color(params, "color", DEFAULT_TEXT_COLOR, strict),
        size=_resolve_number(params, "size", DEFAULT_SIZE, SIZE_MIN, SIZE_MAX, strict),
        font_size_multiplier=_resolve_number(
            params,
            "fontSize",
            DEFAULT_FONT_SIZE_MULTIPLIER,
            FONT_SIZE_MIN,
            FONT_SIZE_MAX,
            strict,
        ),
        font_weight=font_weight,
        font_family=_present(params, "fontFamily") or DEFAULT_FONT_FAMILY,
    )
    _log.debug("Resolved avatar config: %s", config.model_dump())
    return config
