"""
Avatar endpoint — FastAPI router.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from .config import settings
from .openapi import AVATAR_DESCRIPTION, AVATAR_PARAMETERS, AVATAR_RESPONSES, AVATAR_SUMMARY
from .renderer import SVG_MEDIA_TYPE, render_avatar_svg
from .resolver import InvalidAvatarParameter, resolve_avatar_config

_log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Avatar"])


class SVGResponse(Response):
    media_type = SVG_MEDIA_TYPE


@router.get(
    "/avatar",
    response_class=SVGResponse,
    summary=AVATAR_SUMMARY,
    description=AVATAR_DESCRIPTION,
    responses=AVATAR_RESPONSES,
    openapi_extra={"parameters": AVATAR_PARAMETERS},
)
def get_avatar(request: Request) -> SVGResponse:
    """Render the avatar described by the query string."""
    try:
        config = resolve_avatar_config(
            request.query_params, strict=settings.STRICT_VALIDATION
        )
    except InvalidAvatarParameter as exc:
        _log.info("Rejected avatar request: param=%s %s", exc.param, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return SVGResponse(content=render_avatar_svg(config))
