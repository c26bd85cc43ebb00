"""
Letter Engine - Letter Type Registry

Each letter type names the reason catalog it draws from and the fields it
requires or accepts. The validator and the presentation layer read field
sets from here; no other module branches on letter type except the
renderers.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Tuple, Union

from ...models.letters import LetterType, ReasonCatalogId
from .errors import InvalidLetterType


# Required for every letter type
BASE_REQUIRED_FIELDS: Tuple[str, ...] = ("full_name", "email", "merchant_name")


@dataclass(frozen=True)
class LetterTypeProfile:
    """Static metadata for one letter type."""
    letter_type: LetterType
    name: str
    description: str
    icon: str
    reason_catalog: ReasonCatalogId
    reason_label: str
    filename_prefix: str
    required_fields: Tuple[str, ...]
    optional_fields: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "letter_type": self.letter_type.value,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "reason_catalog": self.reason_catalog.value,
            "reason_label": self.reason_label,
            "required_fields": list(self.required_fields),
            "optional_fields": list(self.optional_fields),
        }


# =============================================================================
# LETTER TYPE PROFILES
# =============================================================================

LETTER_TYPES: Mapping[LetterType, LetterTypeProfile] = MappingProxyType({
    LetterType.BANK_DISPUTE: LetterTypeProfile(
        letter_type=LetterType.BANK_DISPUTE,
        name="Bank/Card Dispute",
        description="Dispute a charge with your credit card company or bank",
        icon="🏦",
        reason_catalog=ReasonCatalogId.DISPUTE,
        reason_label="Dispute Reason",
        filename_prefix="dispute",
        required_fields=BASE_REQUIRED_FIELDS,
        optional_fields=(
            "phone",
            "address",  # Shown as required for bank disputes, not enforced
            "transaction_date",
            "transaction_amount",
            "account_last4",
            "card_type",
            "bank_name",
            "bank_address",
            "additional_details",
            "supporting_docs",
        ),
    ),

    LetterType.MERCHANT_REFUND: LetterTypeProfile(
        letter_type=LetterType.MERCHANT_REFUND,
        name="Merchant Refund Request",
        description="Request a refund directly from a merchant or company",
        icon="🏪",
        reason_catalog=ReasonCatalogId.REFUND,
        reason_label="Refund Reason",
        filename_prefix="refund",
        required_fields=BASE_REQUIRED_FIELDS,
        optional_fields=(
            "phone",
            "address",
            "transaction_date",
            "transaction_amount",
            "order_number",
            "product_description",
            "additional_details",
            "previous_contact",
        ),
    ),
})


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_letter_type(value: Union[LetterType, str, None]) -> LetterType:
    """
    Coerce a letter type value.

    Accepts enum members and loose spellings such as "bank_dispute",
    "Bank-Dispute" or "MERCHANT REFUND". Raises InvalidLetterType otherwise.
    """
    if isinstance(value, LetterType):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidLetterType(value)
    normalized = value.strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return LetterType(normalized)
    except ValueError:
        raise InvalidLetterType(value) from None


def get_letter_type_profile(letter_type: Union[LetterType, str]) -> LetterTypeProfile:
    return LETTER_TYPES[get_letter_type(letter_type)]


def list_letter_types() -> List[LetterTypeProfile]:
    """Get all letter type profiles in declaration order."""
    return list(LETTER_TYPES.values())


def required_fields(letter_type: Union[LetterType, str]) -> FrozenSet[str]:
    return frozenset(get_letter_type_profile(letter_type).required_fields)


def optional_fields(letter_type: Union[LetterType, str]) -> Tuple[str, ...]:
    """Fields the form should surface for this letter type, in display order."""
    return get_letter_type_profile(letter_type).optional_fields


def reason_catalog(letter_type: Union[LetterType, str]) -> ReasonCatalogId:
    return get_letter_type_profile(letter_type).reason_catalog
