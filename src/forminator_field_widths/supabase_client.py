"""
Supabase-backed option store and form registry.

Uses the official Supabase Python client. Tables:

- `ffw_options`: `option_name text primary key`, `option_value jsonb`
- `forminator_forms`: `id bigint`, `name text`, `fields jsonb`
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from supabase import Client, create_client

from .errors import StorageError
from .forms import FormRecord, form_from_row

logger = logging.getLogger(__name__)

OPTIONS_TABLE = "ffw_options"
FORMS_TABLE = "forminator_forms"


def create_supabase_client(url: Optional[str], key: Optional[str]) -> Optional[Client]:
    if not url or not key:
        return None
    try:
        return create_client(url, key)
    except Exception as e:
        logger.error("[Supabase] Failed to create client: %s", e)
        return None


class SupabaseOptionStore:
    def __init__(self, client: Client, table: str = OPTIONS_TABLE) -> None:
        self.client = client
        self.table = table

    def get(self, key: str, default: Any = None) -> Any:
        try:
            result = (
                self.client.table(self.table)
                .select("option_value")
                .eq("option_name", key)
                .execute()
            )
        except Exception as e:
            logger.exception("[Supabase] Error reading option %s", key)
            raise StorageError(f"Could not read option {key}.") from e
        rows = result.data or []
        if not rows:
            return default
        return rows[0].get("option_value", default)

    def set(self, key: str, value: Any) -> None:
        try:
            (
                self.client.table(self.table)
                .upsert({"option_name": key, "option_value": value}, on_conflict="option_name")
                .execute()
            )
        except Exception as e:
            logger.exception("[Supabase] Error writing option %s", key)
            raise StorageError(f"Could not write option {key}.") from e

    def delete(self, key: str) -> bool:
        try:
            result = self.client.table(self.table).delete().eq("option_name", key).execute()
        except Exception as e:
            logger.exception("[Supabase] Error deleting option %s", key)
            raise StorageError(f"Could not delete option {key}.") from e
        return bool(result.data)

    def keys(self, prefix: str = "") -> List[str]:
        try:
            query = self.client.table(self.table).select("option_name")
            if prefix:
                query = query.like("option_name", f"{prefix}%")
            result = query.execute()
        except Exception as e:
            logger.exception("[Supabase] Error listing options prefix=%s", prefix)
            raise StorageError("Could not list options.") from e
        names = [str(row.get("option_name")) for row in result.data or [] if isinstance(row, dict)]
        # `_` is a LIKE wildcard, so re-check the prefix literally.
        return sorted(n for n in names if n.startswith(prefix))


class SupabaseFormRegistry:
    def __init__(self, client: Client, table: str = FORMS_TABLE) -> None:
        self.client = client
        self.table = table

    def get_form(self, form_id: int) -> Optional[FormRecord]:
        result = (
            self.client.table(self.table)
            .select("id, name, fields")
            .eq("id", int(form_id))
            .execute()
        )
        rows = result.data or []
        if not rows or not isinstance(rows[0], dict):
            return None
        return form_from_row(rows[0])

    def list_forms(self) -> List[FormRecord]:
        try:
            result = self.client.table(self.table).select("id, name, fields").order("id").execute()
        except Exception as e:
            logger.error("[Supabase] Error listing forms: %s", e)
            return []
        out: List[FormRecord] = []
        for row in result.data or []:
            if not isinstance(row, dict):
                continue
            form = form_from_row(row)
            if form is not None:
                out.append(form)
        return out
