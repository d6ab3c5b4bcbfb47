from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ...context import AppContext
from ...forms import form_fields, normalize_fields
from ...presets import active_preset_button
from ..deps import parse_form_id, require_admin
from ..models import FieldsResponse, FieldSummary, FormsResponse, FormSummary

router = APIRouter(prefix="/forms", tags=["forms"])


@router.get("", response_model=FormsResponse, response_model_by_alias=True)
def list_forms(ctx: AppContext = Depends(require_admin)) -> FormsResponse:
    with_widths = set(ctx.manager.forms_with_widths())
    forms: List[FormSummary] = [
        FormSummary(
            id=form.id,
            name=form.name,
            field_count=len(normalize_fields(form.fields)),
            has_widths=form.id in with_widths,
        )
        for form in ctx.forms.list_forms()
    ]
    return FormsResponse(forms=forms)


@router.get("/{form_id}/fields", response_model=FieldsResponse, response_model_by_alias=True)
def list_fields(form_id: str, ctx: AppContext = Depends(require_admin)) -> FieldsResponse:
    """Fields of one form, each with its stored width config and highlighted quick-pick button."""
    fid = parse_form_id(form_id)
    stored = ctx.manager.get_form_widths(fid)["fields"]
    out: List[FieldSummary] = []
    for rec in form_fields(ctx.forms, fid):
        config = stored.get(rec.id)
        width = config["width"] if config else 100
        out.append(FieldSummary(**rec.to_dict(), config=config, active_preset=active_preset_button(width)))
    return FieldsResponse(form_id=fid, fields=out)
