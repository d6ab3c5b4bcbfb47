from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClearCacheRequest(BaseModel):
    """Clear one form's cached CSS, or every form's when `formId` is omitted or 0."""

    model_config = ConfigDict(populate_by_name=True)

    form_id: Optional[Any] = Field(default=None, alias="formId")


class FieldSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str = ""
    label: str = ""
    cols: int = 12
    config: Optional[Dict[str, Any]] = Field(default=None, description="Stored width config; null when unset")
    active_preset: Optional[float] = Field(default=None, alias="activePreset")


class FormSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = ""
    field_count: int = Field(default=0, alias="fieldCount")
    has_widths: bool = Field(default=False, alias="hasWidths")


class FormsResponse(BaseModel):
    ok: bool = True
    forms: List[FormSummary] = Field(default_factory=list)


class FieldsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    form_id: int = Field(alias="formId")
    fields: List[FieldSummary] = Field(default_factory=list)
