"""
Letter Engine - Reason Catalogs

Two independent, read-only catalogs of reasons:
- DISPUTE_REASONS: why a charge is disputed with a bank or card issuer
- REFUND_REASONS: why a refund is requested from a merchant

Declaration order is the order shown in the reason picker.
"""
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from ...models.letters import Reason, ReasonCatalogId
from .errors import ReasonNotFound


def _catalog(catalog: ReasonCatalogId, entries: List[Tuple[str, str, str, Tuple[str, ...]]]) -> Mapping[str, Reason]:
    reasons: Dict[str, Reason] = {}
    for key, name, description, tips in entries:
        reasons[key] = Reason(key=key, catalog=catalog, name=name, description=description, tips=tips)
    return MappingProxyType(reasons)


# =============================================================================
# DISPUTE REASONS (bank / card issuer)
# =============================================================================

DISPUTE_REASONS: Mapping[str, Reason] = _catalog(ReasonCatalogId.DISPUTE, [
    (
        "UNAUTHORIZED",
        "Unauthorized/Fraudulent Charge",
        "A charge you did not make or authorize",
        (
            "Report immediately if card was lost/stolen",
            "Federal law limits liability to $50 for credit cards",
            "Check for other suspicious activity",
        ),
    ),
    (
        "NOT_RECEIVED",
        "Item/Service Not Received",
        "You paid but never received the product or service",
        (
            "Document expected vs actual delivery date",
            "Include any tracking information",
            "Note attempts to contact the merchant",
        ),
    ),
    (
        "NOT_AS_DESCRIBED",
        "Not As Described/Defective",
        "Product or service differs significantly from what was advertised",
        (
            "Take photos of the item received",
            "Save the original listing/description",
            "Document the specific differences",
        ),
    ),
    (
        "DUPLICATE_CHARGE",
        "Duplicate/Incorrect Amount",
        "Charged twice or charged the wrong amount",
        (
            "Note both charge dates and amounts",
            "Include the correct amount if overcharged",
            "Check if one charge is pending vs posted",
        ),
    ),
    (
        "CANCELLED_RECURRING",
        "Cancelled Subscription Still Charged",
        "Charged for a subscription you already cancelled",
        (
            "Include cancellation confirmation if available",
            "Note the date you cancelled",
            "Reference any confirmation numbers",
        ),
    ),
    (
        "REFUND_NOT_PROCESSED",
        "Refund Not Received",
        "Merchant agreed to refund but it was never processed",
        (
            "Include refund confirmation/promise",
            "Note how long you have waited",
            "Document merchant communications",
        ),
    ),
])


# =============================================================================
# REFUND REASONS (merchant)
# =============================================================================

REFUND_REASONS: Mapping[str, Reason] = _catalog(ReasonCatalogId.REFUND, [
    (
        "DEFECTIVE",
        "Defective/Damaged Product",
        "Item arrived broken, damaged, or does not work",
        (
            "Take photos before and after opening",
            "Keep all original packaging",
            "Note if damage was visible on delivery",
        ),
    ),
    (
        "NOT_AS_DESCRIBED",
        "Not As Described",
        "Product differs from the listing or advertisement",
        (
            "Screenshot the original listing",
            "Document specific differences",
            "Compare advertised vs received specs",
        ),
    ),
    (
        "NOT_DELIVERED",
        "Never Received",
        "Order was never delivered",
        (
            "Check tracking status",
            "Verify delivery address was correct",
            "Note expected delivery date",
        ),
    ),
    (
        "SERVICE_NOT_RENDERED",
        "Service Not Provided",
        "Paid for a service that was not delivered",
        (
            "Document the agreed service terms",
            "Note any missed appointments",
            "Include contract or agreement details",
        ),
    ),
    (
        "SUBSCRIPTION_ISSUE",
        "Subscription/Billing Issue",
        "Unwanted renewal, trial conversion, or billing error",
        (
            "Note when you expected billing to stop",
            "Include any cancellation attempts",
            "Reference terms of service",
        ),
    ),
    (
        "DISSATISFACTION",
        "General Dissatisfaction",
        "Product or service did not meet expectations",
        (
            "Check the return policy first",
            "Be specific about the issue",
            "Propose a reasonable resolution",
        ),
    ),
])


REASON_CATALOGS: Mapping[ReasonCatalogId, Mapping[str, Reason]] = MappingProxyType({
    ReasonCatalogId.DISPUTE: DISPUTE_REASONS,
    ReasonCatalogId.REFUND: REFUND_REASONS,
})


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def list_reasons(catalog: ReasonCatalogId) -> List[Tuple[str, Reason]]:
    """Get (key, Reason) pairs in declaration order."""
    return list(REASON_CATALOGS[ReasonCatalogId(catalog)].items())


def get_reason(catalog: ReasonCatalogId, key: str) -> Reason:
    """Look up a reason by key. Raises ReasonNotFound if absent from this catalog."""
    catalog = ReasonCatalogId(catalog)
    try:
        return REASON_CATALOGS[catalog][key]
    except KeyError:
        raise ReasonNotFound(catalog.value, key) from None


def find_reason_catalogs(key: str) -> List[ReasonCatalogId]:
    """Get every catalog that declares the given key."""
    return [catalog_id for catalog_id, reasons in REASON_CATALOGS.items() if key in reasons]
