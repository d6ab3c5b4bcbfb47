"""
Application wiring.

`build_context` constructs every component once, at process start; callers hold the
returned `AppContext` and pass it (or its parts) explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import OPTIONS_KEY, PluginOptions, Settings, parse_plugin_options
from .css_cache import CssCache
from .events import EventBus
from .forms import FormRegistry, StaticFormRegistry
from .frontend import Frontend
from .option_store import JsonFileOptionStore, MemoryOptionStore, OptionStore
from .width_manager import WidthManager

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    options: PluginOptions
    store: OptionStore
    forms: FormRegistry
    cache: CssCache
    events: EventBus
    manager: WidthManager
    frontend: Frontend


def _supabase_client(settings: Settings):
    from .supabase_client import create_supabase_client

    client = create_supabase_client(settings.supabase_url, settings.supabase_key)
    if client is None:
        raise RuntimeError("Supabase backend selected but SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY are not usable.")
    return client


def build_store(settings: Settings) -> OptionStore:
    backend = settings.store_backend
    if backend == "memory":
        return MemoryOptionStore()
    if backend == "file":
        return JsonFileOptionStore(settings.store_path)
    if backend == "supabase":
        from .supabase_client import SupabaseOptionStore

        return SupabaseOptionStore(_supabase_client(settings))
    raise ValueError(f"Unknown FFW_STORE_BACKEND={backend!r}")


def build_registry(settings: Settings) -> FormRegistry:
    backend = settings.forms_backend
    if backend == "static":
        if settings.forms_file:
            return StaticFormRegistry.from_file(settings.forms_file)
        return StaticFormRegistry()
    if backend == "supabase":
        from .supabase_client import SupabaseFormRegistry

        return SupabaseFormRegistry(_supabase_client(settings))
    raise ValueError(f"Unknown FFW_FORMS_BACKEND={backend!r}")


def build_context(
    settings: Settings,
    *,
    store: OptionStore | None = None,
    forms: FormRegistry | None = None,
) -> AppContext:
    store = store if store is not None else build_store(settings)
    forms = forms if forms is not None else build_registry(settings)
    options = parse_plugin_options(store.get(OPTIONS_KEY, {}))
    events = EventBus()
    cache = CssCache(store)
    manager = WidthManager(store, forms, cache, events)
    frontend = Frontend(manager, cache, events, options)
    logger.info(
        "context ready store=%s forms=%s mobile_full_width=%s breakpoint=%s",
        settings.store_backend,
        settings.forms_backend,
        options.mobile_full_width,
        options.mobile_breakpoint,
    )
    return AppContext(
        settings=settings,
        options=options,
        store=store,
        forms=forms,
        cache=cache,
        events=events,
        manager=manager,
        frontend=frontend,
    )
