from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from ...context import AppContext
from ...sanitize import absint
from ..deps import require_admin
from ..models import ClearCacheRequest

router = APIRouter(tags=["admin"])


@router.get("/presets")
def presets(ctx: AppContext = Depends(require_admin)) -> Dict[str, Any]:
    return {"ok": True, "presets": ctx.manager.get_presets()}


@router.get("/options")
def options(ctx: AppContext = Depends(require_admin)) -> Dict[str, Any]:
    return {"ok": True, "options": ctx.options.model_dump()}


@router.post("/cache/clear")
def clear_cache(body: Any = Body(default=None), ctx: AppContext = Depends(require_admin)) -> Dict[str, Any]:
    """A `formId` that coerces to 0 (missing, junk, or 0 itself) clears every form."""
    req = ClearCacheRequest.model_validate(body if isinstance(body, dict) else {})
    fid = absint(req.form_id)
    if not fid:
        cleared = ctx.manager.clear_all_caches()
        return {"ok": True, "message": "Cache cleared successfully.", "cleared": cleared}

    ctx.manager.clear_form_cache(fid)
    return {"ok": True, "message": "Cache cleared successfully.", "formId": fid}
