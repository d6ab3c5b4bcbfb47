from __future__ import annotations

from typing import Optional

from .option_store import OptionStore

CSS_CACHE_PREFIX = "ffw_form_css_"


class CssCache:
    """Generated CSS per form, kept in the option store next to the width documents."""

    def __init__(self, store: OptionStore) -> None:
        self.store = store

    @staticmethod
    def key(form_id: int) -> str:
        return f"{CSS_CACHE_PREFIX}{form_id}"

    def get(self, form_id: int) -> Optional[str]:
        value = self.store.get(self.key(form_id))
        return value if isinstance(value, str) else None

    def set(self, form_id: int, css: str) -> None:
        self.store.set(self.key(form_id), css)

    def invalidate(self, form_id: int) -> None:
        self.store.delete(self.key(form_id))

    def invalidate_all(self) -> int:
        keys = self.store.keys(CSS_CACHE_PREFIX)
        for key in keys:
            self.store.delete(key)
        return len(keys)
