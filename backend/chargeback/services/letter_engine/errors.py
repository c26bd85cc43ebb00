"""
Letter Engine - Error Taxonomy

Every validation error is local, deterministic and recoverable by the
person filling the form. Nothing here represents a system fault.
"""
from typing import Any, Dict, Optional


class LetterEngineError(Exception):
    """Base class for all letter engine errors."""

    code = "letter_engine_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "field": self.field,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


class ReasonNotFound(LetterEngineError, KeyError):
    """A reason key is absent from the catalog it was looked up in."""

    code = "reason_not_found"

    def __init__(self, catalog: str, key: str):
        super().__init__(f"No reason '{key}' in the {catalog} catalog", field="reason")
        self.catalog = catalog
        self.key = key


# =============================================================================
# VALIDATION ERRORS
# =============================================================================

class LetterValidationError(LetterEngineError, ValueError):
    """A LetterRequest cannot be rendered as submitted."""

    code = "validation_error"


class InvalidLetterType(LetterValidationError):
    code = "invalid_type"

    def __init__(self, value: Any):
        super().__init__(f"Unknown letter type: {value!r}", field="letter_type")
        self.value = value


class MissingRequiredField(LetterValidationError):
    code = "missing_required_field"

    def __init__(self, field_name: str):
        super().__init__(f"Required field is empty: {field_name}", field=field_name)


class MissingReason(LetterValidationError):
    code = "missing_reason"

    def __init__(self, reason_label: str = "Reason"):
        super().__init__(f"Please select a {reason_label.lower()}", field="reason")
        self.reason_label = reason_label


class ReasonTypeMismatch(LetterValidationError):
    """The reason exists, but only in the other letter type's catalog."""

    code = "reason_type_mismatch"

    def __init__(self, reason_key: str, letter_type: str):
        super().__init__(
            f"Reason '{reason_key}' is not available for {letter_type} letters",
            field="reason",
        )
        self.reason_key = reason_key
        self.letter_type = letter_type


class UnknownReason(LetterValidationError):
    code = "unknown_reason"

    def __init__(self, reason_key: str):
        super().__init__(f"Unknown reason: {reason_key!r}", field="reason")
        self.reason_key = reason_key

