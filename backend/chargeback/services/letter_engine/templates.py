"""
Letter Engine - Templates

One pure render function per letter type. Each letter is assembled from
paragraphs in a fixed order; optional paragraphs are None when their field
is empty and are dropped together with their label.

Boilerplate paragraphs are HARD-LOCKED - they carry the statutory and
process language for each letter type and are never parameterized.
"""
from datetime import date
from typing import Callable, Dict, Optional

from ...models.letters import (
    AdditionalInfo,
    LetterType,
    RequesterIdentity,
    TransactionDetails,
)
from .formatting import (
    REASON_PLACEHOLDER,
    format_amount,
    format_long_date,
    format_transaction_date,
    has_value,
    join_lines,
    join_paragraphs,
    optional_block,
    or_placeholder,
)

RenderFunction = Callable[
    [RequesterIdentity, TransactionDetails, AdditionalInfo, str, Optional[date]],
    str,
]

ADDITIONAL_DETAILS_LABEL = "Additional Details:"
SIGN_OFF = "Sincerely,"


# =============================================================================
# BANK DISPUTE - HARD-LOCKED BOILERPLATE
# =============================================================================

BANK_DEPARTMENT = "Billing Inquiries Department"
BANK_SALUTATION = "Dear Billing Inquiries Division,"

BANK_OPENING_TEMPLATE = (
    "I am writing to dispute a charge on my {card_type} account as permitted "
    "under the Fair Credit Billing Act."
)

BANK_REQUEST = (
    "I am requesting that this charge be investigated and removed from my account. "
    "I am also requesting that any finance charges or fees related to this disputed "
    "amount be credited to my account."
)

BANK_SUPPORTING_DOCS_LABEL = "I have enclosed copies of the following supporting documents:"

BANK_INVESTIGATION = (
    "Please investigate this dispute and provide written confirmation of the resolution. "
    "As required by law, please acknowledge receipt of this dispute within 30 days and "
    "resolve this matter within two billing cycles (not to exceed 90 days)."
)

BANK_PAYMENT_WITHHELD = (
    "I understand that I am not required to pay the disputed amount or related charges "
    "while this investigation is pending."
)

BANK_CORRESPONDENCE_TEMPLATE = (
    "Please send all correspondence to the address above or email me at {email}."
)


# =============================================================================
# MERCHANT REFUND - HARD-LOCKED BOILERPLATE
# =============================================================================

MERCHANT_DEPARTMENT = "Customer Service Department"

MERCHANT_OPENING = "I am writing to request a refund for a recent purchase."

MERCHANT_REQUEST_TEMPLATE = "I am requesting a full refund of {amount} to my original payment method."

MERCHANT_PREVIOUS_CONTACT_LABEL = "I have previously attempted to resolve this issue:"

MERCHANT_PROCESSING_TEMPLATE = (
    "Please process this refund within 10 business days. If you require any additional "
    "information or documentation, please contact me at {contact}."
)

MERCHANT_ESCALATION = (
    "If I do not receive a response or refund within a reasonable timeframe, I may need "
    "to dispute this charge with my credit card company or pursue other remedies "
    "available to me."
)

MERCHANT_THANKS = "Thank you for your prompt attention to this matter."


# =============================================================================
# RENDERERS
# =============================================================================

def render_bank_dispute(
    identity: RequesterIdentity,
    transaction: TransactionDetails,
    additional: AdditionalInfo,
    reason_text: str,
    today: Optional[date] = None,
) -> str:
    """Render a Fair Credit Billing Act dispute letter to a card issuer."""
    today = today or date.today()
    last4 = or_placeholder(transaction.account_last4, "XXXX")

    return join_paragraphs(
        join_lines(
            identity.full_name,
            or_placeholder(identity.address, "[Your Address]"),
            identity.email,
            identity.phone,
        ),
        format_long_date(today),
        join_lines(
            or_placeholder(transaction.bank_name, "[Card Issuer Name]"),
            BANK_DEPARTMENT,
            or_placeholder(transaction.bank_address, "[Card Issuer Address]"),
        ),
        f"RE: Notice of Disputed Charge - Account ending in {last4}",
        BANK_SALUTATION,
        BANK_OPENING_TEMPLATE.format(card_type=or_placeholder(transaction.card_type, "credit card")),
        "\n".join([
            "Disputed Transaction Details:",
            f"- Merchant Name: {transaction.merchant_name}",
            f"- Transaction Date: {format_transaction_date(transaction.transaction_date)}",
            f"- Transaction Amount: {format_amount(transaction.transaction_amount)}",
            f"- Account Number (last 4 digits): {last4}",
        ]),
        f"Reason for Dispute:\n{or_placeholder(reason_text, REASON_PLACEHOLDER)}",
        optional_block(ADDITIONAL_DETAILS_LABEL, additional.additional_details),
        BANK_REQUEST,
        optional_block(BANK_SUPPORTING_DOCS_LABEL, additional.supporting_docs),
        BANK_INVESTIGATION,
        BANK_PAYMENT_WITHHELD,
        BANK_CORRESPONDENCE_TEMPLATE.format(email=identity.email),
        SIGN_OFF,
        identity.full_name,
        f"Enclosures: {or_placeholder(additional.supporting_docs, '[List of enclosed documents]')}",
    )


def render_merchant_refund(
    identity: RequesterIdentity,
    transaction: TransactionDetails,
    additional: AdditionalInfo,
    reason_text: str,
    today: Optional[date] = None,
) -> str:
    """Render a refund request addressed to the merchant's customer service."""
    today = today or date.today()
    order_number = or_placeholder(transaction.order_number, "[Order Number]")
    amount = format_amount(transaction.transaction_amount)

    contact = identity.email
    if has_value(identity.phone):
        contact = f"{identity.email} or {identity.phone}"

    return join_paragraphs(
        join_lines(identity.full_name, identity.email, identity.phone),
        format_long_date(today),
        join_lines(transaction.merchant_name, MERCHANT_DEPARTMENT),
        f"RE: Refund Request - Order #{order_number}",
        f"Dear {transaction.merchant_name} Customer Service,",
        MERCHANT_OPENING,
        "\n".join([
            "Order Details:",
            f"- Order Number: {order_number}",
            f"- Purchase Date: {format_transaction_date(transaction.transaction_date)}",
            f"- Amount Paid: {amount}",
            f"- Product/Service: {or_placeholder(transaction.product_description, '[Description]')}",
        ]),
        f"Reason for Refund Request:\n{or_placeholder(reason_text, REASON_PLACEHOLDER)}",
        optional_block(ADDITIONAL_DETAILS_LABEL, additional.additional_details),
        MERCHANT_REQUEST_TEMPLATE.format(amount=amount),
        optional_block(MERCHANT_PREVIOUS_CONTACT_LABEL, additional.previous_contact),
        MERCHANT_PROCESSING_TEMPLATE.format(contact=contact),
        MERCHANT_ESCALATION,
        MERCHANT_THANKS,
        SIGN_OFF,
        identity.full_name,
    )


RENDERERS: Dict[LetterType, RenderFunction] = {
    LetterType.BANK_DISPUTE: render_bank_dispute,
    LetterType.MERCHANT_REFUND: render_merchant_refund,
}


def get_renderer(letter_type: LetterType) -> RenderFunction:
    return RENDERERS[letter_type]
