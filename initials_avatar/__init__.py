"""
Initials avatar service.

Renders square SVG avatars from one or two initials over HTTP.
"""

from .renderer import render_avatar_svg
from .resolver import InvalidAvatarParameter, resolve_avatar_config
from .schemas import AvatarConfig

__all__ = ["AvatarConfig", "InvalidAvatarParameter", "render_avatar_svg", "resolve_avatar_config"]
