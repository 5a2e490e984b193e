"""
Patient-specific exceptions.

Raised by the odontogram model and the patient services; views translate them
to DRF responses.
"""

from __future__ import annotations

from typing import Any


class PatientError(Exception):
    """Base exception for patient-related errors."""
    pass


class InvalidOdontogramEntry(PatientError):
    """Raised for a tooth outside the FDI permanent set or an unknown status code."""

    def __init__(self, message: str, *, tooth: str | None = None, code: str | None = None):
        self.tooth = tooth
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {'detail': str(self)}
        if self.tooth is not None:
            result['tooth'] = self.tooth
        if self.code is not None:
            result['code'] = self.code
        return result
