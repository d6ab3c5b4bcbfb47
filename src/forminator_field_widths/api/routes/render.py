from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from ...context import AppContext
from ..deps import get_context

# Public: this is what page templates embed, so no admin token.
router = APIRouter(prefix="/render", tags=["render"])


@router.get("/css")
def render_css(ctx: AppContext = Depends(get_context)) -> Response:
    return Response(content=ctx.frontend.collect_css(), media_type="text/css")


@router.get("/style")
def render_style(ctx: AppContext = Depends(get_context)) -> HTMLResponse:
    return HTMLResponse(content=ctx.frontend.render_style_tag())
