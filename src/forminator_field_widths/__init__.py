"""
Per-field width configuration for Forminator forms.

This package holds the service implementation (store, sanitizer, CSS generator, API).

- Runtime package: `src/forminator_field_widths/`
- Vercel entrypoint: `api/index.py`
"""

__version__ = "1.0.0"
