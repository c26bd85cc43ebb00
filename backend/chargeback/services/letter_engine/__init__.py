"""
Letter Engine - Dispute & Refund Letter Composition

Turns a structured LetterRequest into finished plain-text letter prose.

Components:
- Reason catalogs: read-only dispute and refund reasons
- Letter type registry: catalog and field set per letter type
- Validator: rejects incomplete requests before rendering
- Templates: one pure render function per letter type
- LetterAssembler: validate → render → GeneratedLetter

Usage:
    from chargeback.services.letter_engine import generate_letter
    from chargeback.models import LetterRequest, LetterType, RequesterIdentity, TransactionDetails

    letter = generate_letter(LetterRequest(
        letter_type=LetterType.BANK_DISPUTE,
        reason="UNAUTHORIZED",
        identity=RequesterIdentity(full_name="Jane Doe", email="jane@example.com"),
        transaction=TransactionDetails(merchant_name="Acme Co", transaction_amount="19.99"),
    ))

    print(letter.content)
"""

from .errors import (
    LetterEngineError,
    LetterValidationError,
    ReasonNotFound,
    InvalidLetterType,
    MissingRequiredField,
    MissingReason,
    ReasonTypeMismatch,
    UnknownReason,
)

from .reasons import (
    DISPUTE_REASONS,
    REFUND_REASONS,
    REASON_CATALOGS,
    list_reasons,
    get_reason,
    find_reason_catalogs,
)

from .letter_types import (
    LETTER_TYPES,
    BASE_REQUIRED_FIELDS,
    LetterTypeProfile,
    get_letter_type,
    get_letter_type_profile,
    list_letter_types,
    required_fields,
    optional_fields,
    reason_catalog,
)

from .validators import (
    ValidationResult,
    validate,
    resolve_reason,
)

from .templates import (
    RENDERERS,
    render_bank_dispute,
    render_merchant_refund,
    get_renderer,
)

from .assembler import (
    LetterAssembler,
    get_assembler,
    generate_letter,
    suggest_filename,
    reason_tips,
)

__all__ = [
    # Errors
    "LetterEngineError",
    "LetterValidationError",
    "ReasonNotFound",
    "InvalidLetterType",
    "MissingRequiredField",
    "MissingReason",
    "ReasonTypeMismatch",
    "UnknownReason",
    # Reason catalogs
    "DISPUTE_REASONS",
    "REFUND_REASONS",
    "REASON_CATALOGS",
    "list_reasons",
    "get_reason",
    "find_reason_catalogs",
    # Letter types
    "LETTER_TYPES",
    "BASE_REQUIRED_FIELDS",
    "LetterTypeProfile",
    "get_letter_type",
    "get_letter_type_profile",
    "list_letter_types",
    "required_fields",
    "optional_fields",
    "reason_catalog",
    # Validation
    "ValidationResult",
    "validate",
    "resolve_reason",
    # Templates
    "RENDERERS",
    "render_bank_dispute",
    "render_merchant_refund",
    "get_renderer",
    # Assembly
    "LetterAssembler",
    "get_assembler",
    "generate_letter",
    "suggest_filename",
    "reason_tips",
]
