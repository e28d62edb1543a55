"""
Static OpenAPI annotations for ``GET /api/avatar``.

The route reads the raw query string itself (lenient defaulting would clash
with FastAPI's own parameter validation), so its parameters are documented
here and merged into the generated operation through ``openapi_extra``.
"""

from __future__ import annotations

from typing import Any, Dict, List

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
)

AVATAR_SUMMARY = "Generate an SVG avatar image"

AVATAR_DESCRIPTION = (
    "Generates a square SVG avatar using initials.\n"
    "If no values are provided, default initials and colors are used."
)


def _query(name: str, schema: Dict[str, Any], description: str, **extra: Any) -> Dict[str, Any]:
    param = {
        "in": "query",
        "name": name,
        "required": False,
        "schema": schema,
        "description": description,
    }
    param.update(extra)
    return param


AVATAR_PARAMETERS: List[Dict[str, Any]] = [
    _query(
        "name",
        {"type": "string", "default": DEFAULT_FIRST_INITIAL},
        "First name. The first character is used as the first initial.",
        example="John",
    ),
    _query(
        "lastname",
        {"type": "string", "default": DEFAULT_SECOND_INITIAL},
        "Last name. The first character is used as the second initial.",
        example="Doe",
    ),
    _query(
        "backgroundColor",
        {"type": "string", "default": DEFAULT_BACKGROUND_COLOR, "pattern": HEX_COLOR_PATTERN},
        "Background color in hex (without `#`).",
        example="d9d9d9",
    ),
    _query(
        "color",
        {"type": "string", "default": DEFAULT_TEXT_COLOR, "pattern": HEX_COLOR_PATTERN},
        "Text color in hex (without `#`).",
        example="090909",
    ),
    _query(
        "size",
        {
            "type": "integer",
            "minimum": SIZE_MIN,
            "maximum": SIZE_MAX,
            "default": DEFAULT_SIZE,
        },
        "Width and height of the avatar in pixels.",
    ),
    _query(
        "fontSize",
        {
            "type": "number",
            "minimum": FONT_SIZE_MIN,
            "maximum": FONT_SIZE_MAX,
            "default": DEFAULT_FONT_SIZE_MULTIPLIER,
        },
        "Font size multiplier relative to the avatar size.",
    ),
    _query(
        "fontWeight",
        {"type": "string", "default": DEFAULT_FONT_WEIGHT, "enum": list(FONT_WEIGHTS)},
        "Font weight of the initials.",
    ),
    _query(
        "fontFamily",
        {"type": "string", "default": DEFAULT_FONT_FAMILY},
        "Font family used for the initials.",
    ),
]

AVATAR_RESPONSES: Dict[int, Dict[str, Any]] = {
    200: {
        "description": "SVG avatar image",
        "content": {
            "image/svg+xml": {"schema": {"type": "string", "format": "binary"}},
        },
    },
    422: {
        "description": "Malformed parameter (only when strict validation is enabled)",
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "properties": {"detail": {"type": "string"}},
                },
            },
        },
    },
}
