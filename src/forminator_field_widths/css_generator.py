"""
CSS output for field width configurations.

`generate_form_css` is a pure function of its inputs. Fields at (or within 0.1 of)
100% are left alone since that is the form renderer's own default.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Tuple

from .sanitize import absint, to_float

DEFAULT_MOBILE_BREAKPOINT = 768
FULL_WIDTH_TOLERANCE = 0.1


@dataclass(frozen=True)
class CssOptions:
    mobile_full_width: bool = True
    mobile_breakpoint: int = DEFAULT_MOBILE_BREAKPOINT


def format_number(value: float) -> str:
    """Shortest textual form: `50`, `33.333`."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


_BARE_AMP = re.compile(r"&(?!(?:[A-Za-z][A-Za-z0-9]*|#[0-9]+|#[xX][0-9A-Fa-f]+);)")
_ATTR_CHARS = {"<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#039;"}


def esc_attr(value: str) -> str:
    """HTML-escape an identifier, leaving entities that are already encoded intact."""
    text = _BARE_AMP.sub("&amp;", value)
    return "".join(_ATTR_CHARS.get(ch, ch) for ch in text)


def _field_width(config: Any) -> float:
    if isinstance(config, Mapping) and config.get("width") is not None:
        return to_float(config.get("width"))
    return 100.0


def _custom_width_fields(widths: Mapping[str, Any]) -> List[Tuple[str, float]]:
    fields = widths.get("fields") if isinstance(widths, Mapping) else None
    if not isinstance(fields, Mapping):
        return []
    out: List[Tuple[str, float]] = []
    for field_id, config in fields.items():
        width = _field_width(config)
        if abs(width - 100) < FULL_WIDTH_TOLERANCE:
            continue
        out.append((esc_attr(str(field_id)), width))
    return out


def _selectors(form_id: int, field_id: str) -> List[str]:
    return [
        f".forminator-custom-form-{form_id} #{field_id}",
        f".forminator-custom-form-{form_id} #{field_id}.forminator-col",
        f".forminator-ui.forminator-custom-form-{form_id} #{field_id}",
    ]


def generate_form_css(form_id: Any, widths: Mapping[str, Any], options: CssOptions = CssOptions()) -> str:
    form_id = absint(form_id)
    fields = _custom_width_fields(widths)
    if not fields:
        return ""

    rules: List[str] = []
    for field_id, width in fields:
        w = format_number(width)
        rules.append(
            ",\n".join(_selectors(form_id, field_id))
            + f" {{\n  width: {w}% !important;\n  flex: 0 0 {w}% !important;\n  max-width: {w}% !important;\n}}"
        )

    css = f"/* Forminator Field Widths - Form #{form_id} */\n" + "\n\n".join(rules)

    if options.mobile_full_width:
        mobile_rules = [
            f".forminator-custom-form-{form_id} #{field_id} "
            "{ width: 100% !important; flex: 0 0 100% !important; max-width: 100% !important; }"
            for field_id, _ in fields
        ]
        breakpoint = absint(options.mobile_breakpoint)
        css += f"\n\n@media (max-width: {breakpoint}px) {{\n  " + "\n  ".join(mobile_rules) + "\n}"

    return css
