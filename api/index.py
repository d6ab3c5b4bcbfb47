"""
Vercel entrypoint.

The service itself lives in `src/forminator_field_widths/`; this module only exposes
the ASGI app built from environment settings.
"""

from __future__ import annotations

import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.is_dir() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from forminator_field_widths.api.main import create_app  # noqa: E402

app = create_app()
