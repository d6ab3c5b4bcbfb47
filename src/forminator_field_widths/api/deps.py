from __future__ import annotations

import secrets
from typing import Any, Mapping, Optional

from fastapi import Depends, Request

from ..context import AppContext
from ..errors import InvalidInput, PermissionDenied
from ..sanitize import absint


def get_context(request: Request) -> AppContext:
    return request.app.state.ctx


def _request_token(request: Request) -> Optional[str]:
    auth = request.headers.get("authorization") or ""
    scheme, _, value = auth.partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    token = (request.headers.get("x-ffw-token") or "").strip()
    return token or None


def require_admin(request: Request, ctx: AppContext = Depends(get_context)) -> AppContext:
    """Admin routes need the configured token; the error never says which part failed."""
    expected = ctx.settings.admin_token
    supplied = _request_token(request)
    if not expected or not supplied or not secrets.compare_digest(supplied.encode(), expected.encode()):
        raise PermissionDenied()
    return ctx


def parse_form_id(raw: Any) -> int:
    form_id = absint(raw)
    if not form_id:
        raise InvalidInput("Invalid form ID.")
    return form_id


def unwrap(body: Any, key: str) -> Any:
    """Accept both `{key: {...}}` envelopes and the bare document."""
    if isinstance(body, Mapping) and isinstance(body.get(key), Mapping):
        return body[key]
    return body
