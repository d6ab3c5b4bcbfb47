"""
Read-only view of the external form builder.

Forms and their fields come from outside this service and their field payloads are
not stable: entries can be plain mappings, attribute objects, objects exposing
`to_array()`, or wrapper rows carrying their own `fields` list. `normalize_fields`
reduces all of them to one `FieldRecord` shape.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol

from .sanitize import absint

logger = logging.getLogger(__name__)

_LABEL_KEYS = ("field_label", "label", "placeholder")


@dataclass(frozen=True)
class FieldRecord:
    id: str
    type: str = ""
    label: str = ""
    cols: int = 12

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class FormRecord:
    id: int
    name: str = ""
    fields: List[Any] = field(default_factory=list)


class FormRegistry(Protocol):
    def get_form(self, form_id: int) -> Optional[FormRecord]: ...

    def list_forms(self) -> List[FormRecord]: ...


def _as_mapping(raw: Any) -> Optional[Mapping[str, Any]]:
    if isinstance(raw, Mapping):
        return raw
    to_array = getattr(raw, "to_array", None)
    if callable(to_array):
        data = to_array()
        if isinstance(data, Mapping):
            # Model objects keep `slug` outside their array form.
            slug = getattr(raw, "slug", None)
            if slug and not data.get("element_id"):
                data = {**data, "element_id": slug}
            return data
    if raw is not None and hasattr(raw, "__dict__"):
        data = dict(vars(raw))
        if not data.get("element_id") and data.get("slug"):
            data["element_id"] = data["slug"]
        return data
    return None


def _field_record(data: Mapping[str, Any]) -> Optional[FieldRecord]:
    field_id = str(data.get("element_id") or "").strip()
    if not field_id:
        return None
    label = next((str(data[k]) for k in _LABEL_KEYS if data.get(k)), field_id)
    cols = absint(data.get("cols")) if data.get("cols") is not None else 12
    return FieldRecord(id=field_id, type=str(data.get("type") or ""), label=label, cols=cols or 12)


def normalize_fields(raw_fields: Any) -> List[FieldRecord]:
    if not isinstance(raw_fields, Iterable) or isinstance(raw_fields, (str, bytes, Mapping)):
        return []

    out: List[FieldRecord] = []
    for raw in raw_fields:
        data = _as_mapping(raw)
        if data is None:
            continue
        inner = data.get("fields")
        if isinstance(inner, (list, tuple)):
            out.extend(normalize_fields(inner))
            continue
        rec = _field_record(data)
        if rec is not None:
            out.append(rec)
    return out


def form_exists(registry: FormRegistry, form_id: int) -> bool:
    """Any lookup failure counts as "no such form"."""
    try:
        return registry.get_form(form_id) is not None
    except Exception as e:
        logger.warning("form lookup failed form_id=%s err=%r", form_id, e)
        return False


def form_fields(registry: FormRegistry, form_id: int) -> List[FieldRecord]:
    try:
        form = registry.get_form(form_id)
    except Exception as e:
        logger.warning("form lookup failed form_id=%s err=%r", form_id, e)
        return []
    if form is None:
        return []
    return normalize_fields(form.fields)


def form_from_row(row: Mapping[str, Any]) -> Optional[FormRecord]:
    form_id = absint(row.get("id"))
    if not form_id:
        return None
    fields = row.get("fields")
    if isinstance(fields, str):
        try:
            fields = json.loads(fields)
        except json.JSONDecodeError:
            fields = []
    return FormRecord(
        id=form_id,
        name=str(row.get("name") or row.get("title") or f"Form #{form_id}"),
        fields=fields if isinstance(fields, list) else [],
    )


class StaticFormRegistry:
    """Forms held in memory, optionally loaded from a JSON file (a list of form rows)."""

    def __init__(self, forms: Iterable[FormRecord] = ()) -> None:
        self._forms: Dict[int, FormRecord] = {f.id: f for f in forms}

    @classmethod
    def from_rows(cls, rows: Any) -> "StaticFormRegistry":
        if isinstance(rows, Mapping):
            rows = rows.get("forms")
        forms: List[FormRecord] = []
        for row in rows if isinstance(rows, list) else []:
            if isinstance(row, Mapping):
                form = form_from_row(row)
                if form is not None:
                    forms.append(form)
        return cls(forms)

    @classmethod
    def from_file(cls, path: Path | str) -> "StaticFormRegistry":
        p = Path(path)
        try:
            rows = json.loads(p.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.warning("forms file not found: %s", p)
            return cls()
        return cls.from_rows(rows)

    def add(self, form: FormRecord) -> None:
        self._forms[form.id] = form

    def get_form(self, form_id: int) -> Optional[FormRecord]:
        return self._forms.get(form_id)

    def list_forms(self) -> List[FormRecord]:
        return [self._forms[k] for k in sorted(self._forms)]
