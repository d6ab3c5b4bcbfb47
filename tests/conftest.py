from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if _SRC.exists():
    sys.path.insert(0, str(_SRC))

from forminator_field_widths.config import Settings  # noqa: E402
from forminator_field_widths.context import build_context  # noqa: E402
from forminator_field_widths.forms import FormRecord, StaticFormRegistry  # noqa: E402
from forminator_field_widths.option_store import MemoryOptionStore  # noqa: E402

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture
def registry() -> StaticFormRegistry:
    return StaticFormRegistry(
        [
            FormRecord(
                id=42,
                name="Contact",
                fields=[
                    {"element_id": "name-1", "type": "name", "field_label": "Your name"},
                    {"element_id": "email-1", "type": "email", "placeholder": "you@example.com"},
                    {"fields": [{"element_id": "phone-1", "type": "phone", "cols": 6}]},
                ],
            ),
            FormRecord(id=7, name="Newsletter", fields=[{"element_id": "email-1", "type": "email"}]),
        ]
    )


@pytest.fixture
def store() -> MemoryOptionStore:
    return MemoryOptionStore()


@pytest.fixture
def ctx(store, registry):
    c = build_context(Settings(admin_token=ADMIN_TOKEN), store=store, forms=registry)
    c.manager.clock = lambda: datetime(2026, 1, 2, 3, 4, 5)
    return c


@pytest.fixture
def client(ctx):
    from fastapi.testclient import TestClient

    from forminator_field_widths.api.main import create_app

    return TestClient(create_app(ctx=ctx))


@pytest.fixture
def auth() -> dict:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
