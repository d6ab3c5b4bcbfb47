from __future__ import annotations

from typing import Any, Dict, Mapping

from fastapi import APIRouter, Body, Depends

from ...context import AppContext
from ...css_generator import generate_form_css
from ...errors import InvalidInput
from ...sanitize import sanitize_field_id, sanitize_widths
from ..deps import parse_form_id, require_admin, unwrap

router = APIRouter(prefix="/forms/{form_id}", tags=["widths"])


@router.get("/widths")
def get_widths(form_id: str, ctx: AppContext = Depends(require_admin)) -> Dict[str, Any]:
    fid = parse_form_id(form_id)
    return {"ok": True, "formId": fid, "widths": ctx.manager.get_form_widths(fid)}


@router.put("/widths")
@router.post("/widths", include_in_schema=False)
def save_widths(
    form_id: str,
    body: Any = Body(default=None),
    ctx: AppContext = Depends(require_admin),
) -> Dict[str, Any]:
    """Replace the whole width document. Body: the document itself or `{"widths": {...}}`."""
    fid = parse_form_id(form_id)
    widths = unwrap(body, "widths")
    if not isinstance(widths, Mapping):
        raise InvalidInput("Invalid widths data.")
    saved = ctx.manager.save_form_widths(fid, widths)
    return {"ok": True, "message": "Field widths saved successfully.", "widths": saved}


@router.delete("/widths")
def clear_widths(form_id: str, ctx: AppContext = Depends(require_admin)) -> Dict[str, Any]:
    fid = parse_form_id(form_id)
    ctx.manager.delete_form_widths(fid)
    return {"ok": True, "message": "All field widths cleared."}


@router.post("/fields/{field_id}/width")
def save_field_width(
    form_id: str,
    field_id: str,
    body: Any = Body(default=None),
    ctx: AppContext = Depends(require_admin),
) -> Dict[str, Any]:
    fid = parse_form_id(form_id)
    key = sanitize_field_id(field_id)
    if key is None:
        raise InvalidInput("Invalid form or field ID.")
    saved = ctx.manager.set_field_width(fid, key, unwrap(body, "config"))
    return {"ok": True, "message": "Field width saved.", "field": saved["fields"].get(key)}


@router.post("/export")
def export_widths(form_id: str, ctx: AppContext = Depends(require_admin)) -> Dict[str, Any]:
    fid = parse_form_id(form_id)
    return {"ok": True, "data": ctx.manager.export_form_widths(fid)}


@router.post("/import")
def import_widths(
    form_id: str,
    body: Any = Body(default=None),
    ctx: AppContext = Depends(require_admin),
) -> Dict[str, Any]:
    """Body: an export payload, or `{"data": <export payload>}`."""
    fid = parse_form_id(form_id)
    saved = ctx.manager.import_form_widths(fid, unwrap(body, "data"))
    return {"ok": True, "message": "Settings imported successfully.", "widths": saved}


@router.post("/preview-css")
def preview_css(
    form_id: str,
    body: Any = Body(default=None),
    ctx: AppContext = Depends(require_admin),
) -> Dict[str, Any]:
    """Render CSS for an unsaved document. Nothing is persisted or cached."""
    fid = parse_form_id(form_id)
    widths = sanitize_widths(unwrap(body, "widths"))
    return {"ok": True, "css": generate_form_css(fid, widths, ctx.options.css_options())}
