from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .css_generator import DEFAULT_MOBILE_BREAKPOINT, CssOptions
from .sanitize import absint

OPTIONS_KEY = "ffw_options"


def _env_bool(name: str, default: bool = False) -> bool:
    v = (os.getenv(name) or "").strip().lower()
    if not v:
        return default
    return v in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_str(name: str, default: str = "") -> str:
    return (os.getenv(name) or "").strip() or default


class Settings(BaseModel):
    """Process configuration, read from the environment once at start-up."""

    store_backend: str = Field(default="memory", description="memory | file | supabase")
    store_path: str = Field(default="ffw_options.json", description="JSON file used by the `file` backend")
    forms_backend: str = Field(default="static", description="static | supabase")
    forms_file: Optional[str] = Field(default=None, description="JSON file listing forms for the static registry")
    admin_token: Optional[str] = Field(default=None, description="Bearer token required by admin routes")
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    http_log: bool = False
    http_log_headers: bool = False
    http_log_body_max_bytes: int = 4096


def load_settings(env_dir: Optional[Path] = None) -> Settings:
    # Load `.env` + `.env.local` when present (local dev convenience).
    from dotenv import load_dotenv

    if env_dir is not None:
        load_dotenv(env_dir / ".env", override=False)
        load_dotenv(env_dir / ".env.local", override=False)

    return Settings(
        store_backend=_env_str("FFW_STORE_BACKEND", "memory").lower(),
        store_path=_env_str("FFW_STORE_PATH", "ffw_options.json"),
        forms_backend=_env_str("FFW_FORMS_BACKEND", "static").lower(),
        forms_file=_env_str("FFW_FORMS_FILE") or None,
        admin_token=_env_str("FFW_ADMIN_TOKEN") or None,
        # Try NEXT_PUBLIC_SUPABASE_URL first (shared with the Next.js side), then SUPABASE_URL.
        supabase_url=_env_str("NEXT_PUBLIC_SUPABASE_URL") or _env_str("SUPABASE_URL") or None,
        supabase_key=_env_str("SUPABASE_SERVICE_ROLE_KEY") or _env_str("NEXT_PUBLIC_SUPABASE_ANON_KEY") or None,
        http_log=_env_bool("FFW_HTTP_LOG", default=False),
        http_log_headers=_env_bool("FFW_HTTP_LOG_HEADERS", default=False),
        http_log_body_max_bytes=_env_int("FFW_HTTP_LOG_BODY_MAX_BYTES", default=4096),
    )


class PluginOptions(BaseModel):
    """Site-wide rendering options, stored under `ffw_options`."""

    enable_responsive: bool = True
    mobile_breakpoint: int = DEFAULT_MOBILE_BREAKPOINT
    mobile_full_width: bool = True

    def css_options(self) -> CssOptions:
        return CssOptions(
            mobile_full_width=self.mobile_full_width,
            mobile_breakpoint=self.mobile_breakpoint,
        )


def parse_plugin_options(saved: Any) -> PluginOptions:
    """Merge a stored options document over the defaults, ignoring unknown or malformed keys."""
    defaults = PluginOptions()
    if not isinstance(saved, dict):
        return defaults
    merged: Dict[str, Any] = defaults.model_dump()
    for key in ("enable_responsive", "mobile_full_width"):
        if key in saved:
            merged[key] = bool(saved[key])
    if "mobile_breakpoint" in saved:
        merged["mobile_breakpoint"] = absint(saved["mobile_breakpoint"]) or DEFAULT_MOBILE_BREAKPOINT
    return PluginOptions(**merged)
