"""
Chargeback Letters - Letter Engine Models

These models are the only data structures passed through the letter
pipeline:

    LetterRequest → validate → render → GeneratedLetter

Catalog records (Reason) are frozen. Field groups are plain dataclasses
filled by the presentation layer; the engine never mutates them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, Tuple, Union


# =============================================================================
# ENUMS
# =============================================================================

class LetterType(str, Enum):
    BANK_DISPUTE = "BANK_DISPUTE"
    MERCHANT_REFUND = "MERCHANT_REFUND"


class ReasonCatalogId(str, Enum):
    """Which reason catalog a Reason belongs to."""
    DISPUTE = "dispute"
    REFUND = "refund"


# =============================================================================
# CATALOG RECORDS
# =============================================================================

@dataclass(frozen=True)
class Reason:
    """
    A single dispute/refund reason.

    Keys are only unique within a catalog - NOT_AS_DESCRIBED exists in both
    the dispute and the refund catalog as two distinct records.
    """
    key: str
    catalog: ReasonCatalogId
    name: str
    description: str
    tips: Tuple[str, ...] = ()

    @property
    def display_text(self) -> str:
        """Text inserted into the letter body."""
        return f"{self.name}: {self.description}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "catalog": self.catalog.value,
            "name": self.name,
            "description": self.description,
            "tips": list(self.tips),
        }


# =============================================================================
# FIELD GROUPS
# =============================================================================

@dataclass
class RequesterIdentity:
    """The person sending the letter."""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


@dataclass
class TransactionDetails:
    """
    The charge being disputed or refunded.

    Dates are ISO-8601 strings and amounts are unvalidated strings - both
    are rendered as given when present.
    """
    merchant_name: str = ""
    transaction_date: str = ""
    transaction_amount: str = ""

    # Merchant refund only
    order_number: str = ""
    product_description: str = ""

    # Bank dispute only
    account_last4: str = ""
    card_type: str = ""
    bank_name: str = ""
    bank_address: str = ""


@dataclass
class AdditionalInfo:
    """Optional narrative blocks."""
    additional_details: str = ""
    supporting_docs: str = ""  # Bank dispute only
    previous_contact: str = ""  # Merchant refund only


# =============================================================================
# ENGINE INPUT / OUTPUT
# =============================================================================

@dataclass
class LetterRequest:
    """
    Engine input.

    `reason` may be a Reason record, a bare reason key (resolved against the
    letter type's catalog during validation) or None.
    `letter_type` may arrive as a raw string from the caller and is coerced
    by the validator.
    """
    letter_type: Union[LetterType, str, None]
    reason: Union[Reason, str, None]
    identity: RequesterIdentity = field(default_factory=RequesterIdentity)
    transaction: TransactionDetails = field(default_factory=TransactionDetails)
    additional: AdditionalInfo = field(default_factory=AdditionalInfo)


@dataclass(frozen=True)
class GeneratedLetter:
    """
    Engine output - created once per successful generation.

    Edits made by the user after generation produce new text outside the
    engine; this record is never updated.
    """
    content: str
    letter_type: LetterType
    reason_key: str
    generated_on: date
    filename: str  # Suggested export name, see assembler.suggest_filename

    @property
    def word_count(self) -> int:
        return len(self.content.split())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "letter_type": self.letter_type.value,
            "reason_key": self.reason_key,
            "filename": self.filename,
            "word_count": self.word_count,
            "generated_on": self.generated_on.isoformat(),
        }


__all__ = [
    "LetterType",
    "ReasonCatalogId",
    "Reason",
    "RequesterIdentity",
    "TransactionDetails",
    "AdditionalInfo",
    "LetterRequest",
    "GeneratedLetter",
]
