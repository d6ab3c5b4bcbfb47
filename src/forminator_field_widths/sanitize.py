"""
Normalization of width configuration documents.

Everything here is total: any input (including a JSON-decoded request body from an
untrusted client) produces a well-formed document, with defaults substituted for
missing or malformed parts. Coercion follows the PHP rules the WordPress plugin stores
documents with (`floatval`, `absint`, `empty`).
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Mapping, Optional

WIDTH_UNITS = ("percentage", "pixels", "auto")
MAX_WIDTH_VALUE = 1000.0

_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_SCRIPT_STYLE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]*?>", re.DOTALL)
_LONE_LT = re.compile(r"<(?![a-zA-Z/!?])")
_OCTET = re.compile(r"%[a-fA-F0-9]{2}")
_WHITESPACE = re.compile(r"[\r\n\t ]+")


def default_field_config() -> Dict[str, Any]:
    return {
        "width": 100.0,
        "width_unit": "percentage",
        "min_width": 0,
        "max_width": 0,
        "mobile_width": 100.0,
        "tablet_width": None,
    }


def default_responsive() -> Dict[str, bool]:
    return {"enable_mobile": False, "enable_tablet": False, "mobile_full_width": False}


def default_global() -> Dict[str, Any]:
    return {"max_width": 0, "alignment": "left", "gap": 16}


def default_widths() -> Dict[str, Any]:
    return {"fields": {}, "responsive": default_responsive(), "global": default_global()}


def to_float(value: Any) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        out = value
        return 0.0 if math.isnan(out) else out
    if isinstance(value, str):
        m = _NUMERIC_PREFIX.match(value)
        if not m:
            return 0.0
        try:
            out = float(m.group(0))
        except (OverflowError, ValueError):
            return 0.0
        return 0.0 if math.isnan(out) else out
    if isinstance(value, (list, tuple, dict)):
        return 1.0 if value else 0.0
    return 0.0


def absint(value: Any) -> int:
    """`abs(intval(value))`: numeric strings keep their integer prefix, junk becomes 0."""
    f = to_float(value)
    if math.isinf(f):
        return 0
    return abs(int(f))


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, str):
        return value in ("", "0")
    if isinstance(value, (list, tuple, dict)):
        return not value
    return False


def sanitize_text_field(value: Any) -> str:
    """
    Plain-text cleanup for identifiers and short labels:
      - drop tags (and the bodies of script/style elements)
      - encode a stray `<` that does not open a tag
      - remove percent-encoded octets
      - collapse whitespace and trim
    """
    if value is None or isinstance(value, (list, tuple, dict)):
        return ""
    if isinstance(value, bool):
        text = "1" if value else ""
    else:
        text = str(value)
    if "<" in text:
        text = _LONE_LT.sub("&lt;", text)
        text = _SCRIPT_STYLE.sub("", text)
        text = _TAG.sub("", text)
        text = text.replace("<", "&lt;")
    while _OCTET.search(text):
        text = _OCTET.sub("", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


def sanitize_width_value(value: Any) -> float:
    out = to_float(value)
    if out <= 0:
        return 0.0
    if out > MAX_WIDTH_VALUE:
        out = MAX_WIDTH_VALUE
    return round(out, 3)


def _present(config: Mapping[str, Any], key: str) -> bool:
    return config.get(key) is not None


def sanitize_field_config(config: Any) -> Dict[str, Any]:
    if not isinstance(config, Mapping):
        return default_field_config()

    unit = config.get("width_unit")
    return {
        "width": sanitize_width_value(config["width"]) if _present(config, "width") else 100.0,
        "width_unit": unit if isinstance(unit, str) and unit in WIDTH_UNITS else "percentage",
        "min_width": absint(config["min_width"]) if _present(config, "min_width") else 0,
        "max_width": absint(config["max_width"]) if _present(config, "max_width") else 0,
        "mobile_width": sanitize_width_value(config["mobile_width"]) if _present(config, "mobile_width") else 100.0,
        "tablet_width": sanitize_width_value(config["tablet_width"]) if _present(config, "tablet_width") else None,
    }


def _sanitize_fields(raw: Any) -> Dict[str, Dict[str, Any]]:
    if isinstance(raw, (list, tuple)):
        items = [(str(i), v) for i, v in enumerate(raw)]
    elif isinstance(raw, Mapping):
        items = list(raw.items())
    else:
        return {}

    out: Dict[str, Dict[str, Any]] = {}
    for field_id, config in items:
        key = sanitize_text_field(field_id)
        if not key:
            continue
        out[key] = sanitize_field_config(config)
    return out


def _sanitize_responsive(raw: Any) -> Dict[str, bool]:
    if not isinstance(raw, Mapping):
        return default_responsive()
    return {key: not _is_empty(raw.get(key)) for key in default_responsive()}


def _sanitize_global(raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, Mapping):
        return default_global()
    return {
        "max_width": absint(raw["max_width"]) if _present(raw, "max_width") else 0,
        "alignment": sanitize_text_field(raw["alignment"]) if _present(raw, "alignment") else "left",
        "gap": absint(raw["gap"]) if _present(raw, "gap") else 16,
    }


def sanitize_widths(widths: Any) -> Dict[str, Any]:
    """Return the canonical FormWidths document for `widths`. Never raises."""
    if not isinstance(widths, Mapping):
        return default_widths()
    return {
        "fields": _sanitize_fields(widths.get("fields")),
        "responsive": _sanitize_responsive(widths.get("responsive")),
        "global": _sanitize_global(widths.get("global")),
    }


def sanitize_field_id(value: Any) -> Optional[str]:
    key = sanitize_text_field(value)
    return key or None
