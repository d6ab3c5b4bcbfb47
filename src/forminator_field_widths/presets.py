from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_PRESETS: Dict[str, Dict[str, Any]] = {
    "full": {"label": "Full Width", "value": 100, "icon": "full"},
    "half": {"label": "Half Width", "value": 50, "icon": "half"},
    "third": {"label": "One Third", "value": 33.333, "icon": "third"},
    "two-thirds": {"label": "Two Thirds", "value": 66.666, "icon": "two-thirds"},
    "quarter": {"label": "Quarter", "value": 25, "icon": "quarter"},
    "three-quarter": {"label": "Three Quarters", "value": 75, "icon": "three-quarter"},
}

# Quick-pick buttons on the admin field list: (value, match tolerance).
# The thirds are matched loosely because the buttons carry truncated values.
PRESET_BUTTONS: List[Tuple[float, float]] = [
    (100, 0.5),
    (75, 0.5),
    (66.66, 1),
    (50, 0.5),
    (33.33, 1),
    (25, 0.5),
]


def get_presets() -> Dict[str, Dict[str, Any]]:
    return copy.deepcopy(DEFAULT_PRESETS)


def active_preset_button(width: Any) -> Optional[float]:
    """Return the quick-pick button value highlighted for `width`, if any."""
    try:
        w = float(width)
    except (TypeError, ValueError):
        return None
    for value, tolerance in PRESET_BUTTONS:
        if abs(w - value) < tolerance:
            return value
    return None
