"""
Typed notifications raised by the width manager and the render hook.

The set of event kinds is closed; subscribers register per kind and run synchronously,
in subscription order, inside the request that raised the event.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    WIDTHS_SAVED = "widths_saved"
    CACHE_CLEARED = "cache_cleared"
    BEFORE_RENDER = "before_render"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    form_id: Optional[int] = None
    widths: Optional[Dict[str, Any]] = None
    form_ids: Tuple[int, ...] = field(default_factory=tuple)


Subscriber = Callable[[Event], None]


class EventBus:
    def __init__(self) -> None:
        self._subscribers: Dict[EventKind, List[Subscriber]] = {kind: [] for kind in EventKind}

    def subscribe(self, kind: EventKind, callback: Subscriber) -> None:
        self._subscribers[EventKind(kind)].append(callback)

    def emit(self, event: Event) -> None:
        logger.debug("event %s form_id=%s", event.kind.value, event.form_id)
        for callback in list(self._subscribers[event.kind]):
            callback(event)


def widths_saved(form_id: int, widths: Dict[str, Any]) -> Event:
    return Event(kind=EventKind.WIDTHS_SAVED, form_id=form_id, widths=widths)


def cache_cleared(form_id: Optional[int]) -> Event:
    return Event(kind=EventKind.CACHE_CLEARED, form_id=form_id)


def before_render(form_ids: List[int]) -> Event:
    return Event(kind=EventKind.BEFORE_RENDER, form_ids=tuple(form_ids))
