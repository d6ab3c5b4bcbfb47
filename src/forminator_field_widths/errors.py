from __future__ import annotations

from typing import Any, Dict


class FieldWidthsError(Exception):
    """Base error surfaced to callers as `{ok: false, error, message}`."""

    code = "field_widths_error"
    status_code = 400
    default_message = "Request failed."

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "error": self.code, "message": self.message}


class InvalidForm(FieldWidthsError):
    code = "invalid_form"
    default_message = "The specified form does not exist."


class InvalidInput(FieldWidthsError):
    code = "invalid_input"
    default_message = "Invalid request data."


class InvalidImportData(FieldWidthsError):
    code = "invalid_import_data"
    default_message = "Invalid import data format."


class PermissionDenied(FieldWidthsError):
    code = "permission_denied"
    status_code = 403
    default_message = "You do not have permission to perform this action."


class StorageError(FieldWidthsError):
    code = "storage_error"
    status_code = 500
    default_message = "Could not access the option store."
