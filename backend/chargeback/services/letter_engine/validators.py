"""
Letter Engine - Field Schema & Validation

Gates generation on:
1. A known letter type
2. Every required field of that type being non-empty
3. A reason that belongs to the type's catalog

Optional data never blocks generation: dates, amounts and the free-text
blocks are NOT validated and render as given.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ...models.letters import (
    AdditionalInfo,
    LetterType,
    Reason,
    RequesterIdentity,
    TransactionDetails,
)
from .errors import (
    InvalidLetterType,
    LetterValidationError,
    MissingReason,
    MissingRequiredField,
    ReasonTypeMismatch,
    UnknownReason,
)
from .letter_types import BASE_REQUIRED_FIELDS, get_letter_type, get_letter_type_profile
from .reasons import REASON_CATALOGS, find_reason_catalogs


# =============================================================================
# VALIDATION RESULT
# =============================================================================

@dataclass
class ValidationResult:
    """All validation errors for a request, in rule order."""
    errors: List[LetterValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> Optional[LetterValidationError]:
        return self.errors[0] if self.errors else None

    def raise_for_errors(self) -> None:
        """Raise the first error, if any."""
        if self.errors:
            raise self.errors[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": [e.to_dict() for e in self.errors],
        }


# =============================================================================
# FIELD ACCESS
# =============================================================================

def is_blank(value: Optional[str]) -> bool:
    """True for None, empty and whitespace-only values."""
    return value is None or not str(value).strip()


def get_field_value(
    field_name: str,
    identity: RequesterIdentity,
    transaction: TransactionDetails,
    additional: AdditionalInfo,
) -> Optional[str]:
    """Find a field by name across the three field groups."""
    for group in (identity, transaction, additional):
        if hasattr(group, field_name):
            return getattr(group, field_name)
    return None


# =============================================================================
# REASON RESOLUTION
# =============================================================================

def resolve_reason(letter_type: LetterType, reason: Union[Reason, str, None]) -> Reason:
    """
    Resolve a Reason record or key against the letter type's catalog.

    Raises:
        MissingReason: no reason selected
        ReasonTypeMismatch: reason only exists in the other catalog
        UnknownReason: key exists in no catalog
    """
    profile = get_letter_type_profile(letter_type)
    catalog = REASON_CATALOGS[profile.reason_catalog]

    if isinstance(reason, Reason):
        if reason.catalog != profile.reason_catalog:
            raise ReasonTypeMismatch(reason.key, profile.letter_type.value)
        key = reason.key
    else:
        if is_blank(reason):
            raise MissingReason(profile.reason_label)
        key = reason.strip().upper()

    if key in catalog:
        return catalog[key]
    if find_reason_catalogs(key):
        raise ReasonTypeMismatch(key, profile.letter_type.value)
    raise UnknownReason(key)


# =============================================================================
# VALIDATOR
# =============================================================================

def validate(
    letter_type: Union[LetterType, str, None],
    reason: Union[Reason, str, None],
    identity: RequesterIdentity,
    transaction: TransactionDetails,
    additional: AdditionalInfo,
) -> ValidationResult:
    """
    Run every check and collect the failures in rule order.

    When the letter type is unknown, the baseline required fields are still
    checked but the reason check is skipped (there is no catalog to check
    it against).
    """
    result = ValidationResult()

    # 1. Letter type
    resolved_type: Optional[LetterType] = None
    try:
        resolved_type = get_letter_type(letter_type)
    except InvalidLetterType as e:
        result.errors.append(e)

    # 2. Required fields
    if resolved_type is not None:
        required = get_letter_type_profile(resolved_type).required_fields
    else:
        required = BASE_REQUIRED_FIELDS

    for field_name in required:
        if is_blank(get_field_value(field_name, identity, transaction, additional)):
            result.errors.append(MissingRequiredField(field_name))

    # 3. Reason
    if resolved_type is not None:
        try:
            resolve_reason(resolved_type, reason)
        except LetterValidationError as e:
            result.errors.append(e)

    return result
