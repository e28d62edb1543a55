"""
SVG rendering for initials avatars.

The markup, including its whitespace, is kept stable so identical
configurations always produce byte-identical documents.
"""

from __future__ import annotations

from .schemas import AvatarConfig, Number

SVG_MEDIA_TYPE = "image/svg+xml"

# Text sits at 55% height: dominant-baseline="middle" renders slightly high.
SVG_TEMPLATE = """
    <svg width="{size}" height="{size}" xmlns="http://www.w3.org/2000/svg">
      <rect width="100%" height="100%" fill="#{background}" />
      <text
        x="50%"
        y="55%"
        text-anchor="middle"
        dominant-baseline="middle"
        font-size="{font_size}"
        font-family="{font_family}"
        fill="#{color}"
        font-weight="{font_weight}"
      >
        {initials}
      </text>
    </svg>
  """


def format_number(value: Number) -> str:
    """Format a number without a trailing ``.0`` for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def render_avatar_svg(config: AvatarConfig) -> str:
    """Render the avatar as an SVG document. Values are inserted verbatim."""
    return SVG_TEMPLATE.format(
        size=format_number(config.size),
        background=config.background_color,
        font_size=format_number(config.computed_font_size),
        font_family=config.font_family,
        color=config.text_color,
        font_weight=config.font_weight,
        initials=config.initials,
    )
