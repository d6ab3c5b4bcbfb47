from __future__ import annotations

import logging
from typing import List

from .config import PluginOptions
from .css_cache import CssCache
from .css_generator import generate_form_css
from .events import EventBus, before_render
from .width_manager import WidthManager

logger = logging.getLogger(__name__)

STYLE_TAG_ID = "forminator-field-widths-css"


class Frontend:
    """Page-render side: one combined `<style>` block for every form with stored widths."""

    def __init__(self, manager: WidthManager, cache: CssCache, events: EventBus, options: PluginOptions) -> None:
        self.manager = manager
        self.cache = cache
        self.events = events
        self.options = options

    def form_css(self, form_id: int) -> str:
        cached = self.cache.get(form_id)
        if cached is not None:
            return cached
        css = generate_form_css(form_id, self.manager.get_form_widths(form_id), self.options.css_options())
        self.cache.set(form_id, css)
        return css

    def collect_css(self) -> str:
        form_ids: List[int] = self.manager.forms_with_widths()
        self.events.emit(before_render(form_ids))
        if not form_ids:
            return ""

        out = ""
        for form_id in form_ids:
            css = self.form_css(form_id)
            if css:
                out += css + "\n\n"
        return out

    def render_style_tag(self) -> str:
        css = self.collect_css()
        if not css:
            return ""
        return f'<style id="{STYLE_TAG_ID}" type="text/css">\n{css}</style>\n'
