from __future__ import annotations

import logging

from .config import OPTIONS_KEY
from .css_cache import CSS_CACHE_PREFIX
from .option_store import OptionStore
from .width_manager import OPTION_PREFIX

logger = logging.getLogger(__name__)


def uninstall(store: OptionStore) -> int:
    """Remove every key this service owns. Returns the number of keys deleted."""
    removed = 0
    if store.delete(OPTIONS_KEY):
        removed += 1
    for prefix in (OPTION_PREFIX, CSS_CACHE_PREFIX):
        for key in store.keys(prefix):
            if store.delete(key):
                removed += 1
    logger.info("uninstall removed keys=%s", removed)
    return removed
