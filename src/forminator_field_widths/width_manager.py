"""
Field width configurations per form.

Documents live in the option store under `ffw_form_widths_<form_id>`, always in
sanitized form. Reads of a form without a document return the default document.
Writers to the same form are not coordinated: the last write wins.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

from . import __version__
from .css_cache import CssCache
from .errors import InvalidForm, InvalidImportData, InvalidInput
from .events import EventBus, cache_cleared, widths_saved
from .forms import FormRegistry, form_exists
from .option_store import OptionStore
from .presets import get_presets
from .sanitize import absint, sanitize_field_config, sanitize_text_field, sanitize_widths

logger = logging.getLogger(__name__)

OPTION_PREFIX = "ffw_form_widths_"
EXPORT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class WidthManager:
    def __init__(
        self,
        store: OptionStore,
        forms: FormRegistry,
        cache: CssCache,
        events: EventBus,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store
        self.forms = forms
        self.cache = cache
        self.events = events
        self.clock = clock

    @staticmethod
    def option_key(form_id: int) -> str:
        return f"{OPTION_PREFIX}{form_id}"

    def get_form_widths(self, form_id: Any) -> Dict[str, Any]:
        form_id = absint(form_id)
        return sanitize_widths(self.store.get(self.option_key(form_id), {}))

    def save_form_widths(self, form_id: Any, widths: Any) -> Dict[str, Any]:
        """Sanitize and persist `widths`. Raises `InvalidForm` (and writes nothing) for unknown forms."""
        form_id = absint(form_id)
        if not form_exists(self.forms, form_id):
            raise InvalidForm()

        sanitized = sanitize_widths(widths)
        self.store.set(self.option_key(form_id), sanitized)
        logger.info("saved widths form_id=%s fields=%s", form_id, len(sanitized["fields"]))

        self.clear_form_cache(form_id)
        self.events.emit(widths_saved(form_id, sanitized))
        return sanitized

    def delete_form_widths(self, form_id: Any) -> None:
        form_id = absint(form_id)
        if self.store.delete(self.option_key(form_id)):
            logger.info("deleted widths form_id=%s", form_id)
        self.clear_form_cache(form_id)

    def get_field_width(self, form_id: Any, field_id: Any) -> Optional[Dict[str, Any]]:
        return self.get_form_widths(form_id)["fields"].get(sanitize_text_field(field_id))

    def set_field_width(self, form_id: Any, field_id: Any, config: Any) -> Dict[str, Any]:
        key = sanitize_text_field(field_id)
        if not key:
            raise InvalidInput("Invalid form or field ID.")
        widths = self.get_form_widths(form_id)
        widths["fields"][key] = sanitize_field_config(config)
        return self.save_form_widths(form_id, widths)

    def get_presets(self) -> Dict[str, Dict[str, Any]]:
        return get_presets()

    def clear_form_cache(self, form_id: Any) -> None:
        form_id = absint(form_id)
        self.cache.invalidate(form_id)
        self.events.emit(cache_cleared(form_id))

    def clear_all_caches(self) -> int:
        count = self.cache.invalidate_all()
        logger.info("cleared css cache entries=%s", count)
        self.events.emit(cache_cleared(None))
        return count

    def forms_with_widths(self) -> List[int]:
        form_ids: List[int] = []
        for key in self.store.keys(OPTION_PREFIX):
            suffix = key[len(OPTION_PREFIX):]
            if suffix.isdigit():
                form_ids.append(int(suffix))
        return sorted(form_ids)

    def export_form_widths(self, form_id: Any) -> Dict[str, Any]:
        form_id = absint(form_id)
        return {
            "version": __version__,
            "form_id": form_id,
            "widths": self.get_form_widths(form_id),
            "exported_at": self.clock().strftime(EXPORT_TIME_FORMAT),
        }

    def import_form_widths(self, form_id: Any, data: Any) -> Dict[str, Any]:
        if not isinstance(data, Mapping) or not isinstance(data.get("widths"), Mapping):
            raise InvalidImportData()
        return self.save_form_widths(form_id, data["widths"])
