"""
Letter Template Tests

Verifies:
1. Placeholders render only for absent values; present values render as given
2. Optional blocks disappear entirely (label included) when empty
3. Each template carries its fixed boilerplate and ends with a signature
"""

from datetime import date

import pytest

from chargeback.models import AdditionalInfo, LetterType, RequesterIdentity, TransactionDetails
from chargeback.services.letter_engine import (
    RENDERERS,
    get_renderer,
    render_bank_dispute,
    render_merchant_refund,
)
from chargeback.services.letter_engine.formatting import (
    format_amount,
    format_long_date,
    format_transaction_date,
    join_lines,
    join_paragraphs,
    optional_block,
    or_placeholder,
)

TODAY = date(2024, 3, 1)
DISPUTE_REASON = "Unauthorized/Fraudulent Charge: A charge you did not make or authorize"
REFUND_REASON = "Defective/Damaged Product: Item arrived broken, damaged, or does not work"


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def identity():
    return RequesterIdentity(full_name="Jane Doe", email="jane@x.com")


@pytest.fixture
def transaction():
    return TransactionDetails(merchant_name="Acme Co")


@pytest.fixture
def additional():
    return AdditionalInfo()


# =============================================================================
# FORMATTING HELPERS
# =============================================================================

class TestFormatting:

    def test_long_date_has_no_zero_padding(self):
        assert format_long_date(date(2024, 1, 5)) == "January 5, 2024"
        assert format_long_date(date(2023, 12, 25)) == "December 25, 2023"

    def test_transaction_date_iso(self):
        assert format_transaction_date("2024-01-05") == "January 5, 2024"

    def test_transaction_date_with_time(self):
        assert format_transaction_date("2024-01-05T23:30:00") == "January 5, 2024"

    @pytest.mark.parametrize("value", ["", None, "  "])
    def test_transaction_date_placeholder(self, value):
        assert format_transaction_date(value) == "[Date]"

    @pytest.mark.parametrize("value", ["last Tuesday", "2024-13-45", "01/05/2024"])
    def test_malformed_date_inserted_as_given(self, value):
        assert format_transaction_date(value) == value

    @pytest.mark.parametrize("value", ["2024-01", "2024", "2024-W01", "20240105"])
    def test_partial_date_not_expanded_to_a_day(self, value):
        """A month or year alone must not gain an invented day of the month."""
        assert format_transaction_date(value) == value

    def test_partial_date_in_letter(self):
        letter = render_bank_dispute(
            RequesterIdentity(full_name="Jane Doe", email="jane@example.com"),
            TransactionDetails(merchant_name="Acme Co", transaction_date="2024-01"),
            AdditionalInfo(),
            DISPUTE_REASON,
            today=TODAY,
        )
        assert "- Transaction Date: 2024-01\n" in letter
        assert "January 1, 2024" not in letter

    def test_amount_verbatim(self):
        assert format_amount("42.50") == "$42.50"
        assert format_amount("1,000") == "$1,000"

    def test_amount_placeholder_keeps_symbol(self):
        assert format_amount("") == "$[Amount]"
        assert format_amount(None) == "$[Amount]"

    def test_malformed_amount_inserted_as_given(self):
        assert format_amount("twenty") == "$twenty"

    def test_or_placeholder(self):
        assert or_placeholder("", "[X]") == "[X]"
        assert or_placeholder("value", "[X]") == "value"

    def test_optional_block(self):
        assert optional_block("Label:", "body") == "Label:\nbody"
        assert optional_block("Label:", "") is None
        assert optional_block("Label:", "   ") is None

    def test_join_lines_skips_empty(self):
        assert join_lines("a", "", None, "b") == "a\nb"

    def test_join_paragraphs_skips_none(self):
        assert join_paragraphs("a", None, "b") == "a\n\nb"


# =============================================================================
# BANK DISPUTE TEMPLATE
# =============================================================================

class TestBankDisputeTemplate:

    def test_header_with_placeholders(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert letter.startswith(
            "Jane Doe\n"
            "[Your Address]\n"
            "jane@x.com\n"
            "\n"
            "March 1, 2024\n"
            "\n"
            "[Card Issuer Name]\n"
            "Billing Inquiries Department\n"
            "[Card Issuer Address]\n"
            "\n"
            "RE: Notice of Disputed Charge - Account ending in XXXX\n"
        )

    def test_transaction_block_placeholders(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert (
            "Disputed Transaction Details:\n"
            "- Merchant Name: Acme Co\n"
            "- Transaction Date: [Date]\n"
            "- Transaction Amount: $[Amount]\n"
            "- Account Number (last 4 digits): XXXX"
        ) in letter

    def test_filled_fields(self, additional):
        identity = RequesterIdentity(
            full_name="Jane Doe",
            email="jane@x.com",
            phone="(555) 123-4567",
            address="123 Street, City, ST 00000",
        )
        transaction = TransactionDetails(
            merchant_name="Acme Co",
            transaction_date="2024-02-10",
            transaction_amount="42.50",
            account_last4="1234",
            card_type="debit card",
            bank_name="First Bank",
            bank_address="1 Bank Plaza",
        )
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)

        assert letter.startswith("Jane Doe\n123 Street, City, ST 00000\njane@x.com\n(555) 123-4567\n\n")
        assert "First Bank\nBilling Inquiries Department\n1 Bank Plaza" in letter
        assert "Account ending in 1234" in letter
        assert "on my debit card account as permitted under the Fair Credit Billing Act." in letter
        assert "- Transaction Date: February 10, 2024" in letter
        assert "- Transaction Amount: $42.50" in letter

    def test_default_card_type(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert "a charge on my credit card account" in letter

    def test_reason_section(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert f"Reason for Dispute:\n{DISPUTE_REASON}" in letter

    def test_reason_placeholder(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, "", TODAY)
        assert "Reason for Dispute:\n[Reason]" in letter

    def test_statutory_boilerplate(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert "acknowledge receipt of this dispute within 30 days" in letter
        assert "within two billing cycles (not to exceed 90 days)" in letter
        assert "I am not required to pay the disputed amount" in letter
        assert "email me at jane@x.com." in letter

    def test_optional_blocks_absent(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert "Additional Details:" not in letter
        assert "supporting documents:" not in letter

    def test_optional_blocks_present(self, identity, transaction):
        additional = AdditionalInfo(
            additional_details="Called twice",
            supporting_docs="Receipt, screenshots",
        )
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert "Additional Details:\nCalled twice\n\nI am requesting that this charge" in letter
        assert (
            "I have enclosed copies of the following supporting documents:\n"
            "Receipt, screenshots\n\n"
            "Please investigate this dispute"
        ) in letter
        assert letter.endswith("Enclosures: Receipt, screenshots")

    def test_previous_contact_ignored(self, identity, transaction):
        """Previous contact is a merchant refund block only."""
        additional = AdditionalInfo(previous_contact="Called on Jan 5")
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert "Called on Jan 5" not in letter

    def test_signature_block(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert letter.endswith("Sincerely,\n\nJane Doe\n\nEnclosures: [List of enclosed documents]")

    def test_plain_text_only(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON, TODAY)
        assert "<" not in letter
        assert "**" not in letter


# =============================================================================
# MERCHANT REFUND TEMPLATE
# =============================================================================

class TestMerchantRefundTemplate:

    def test_header(self, identity, transaction, additional):
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert letter.startswith(
            "Jane Doe\n"
            "jane@x.com\n"
            "\n"
            "March 1, 2024\n"
            "\n"
            "Acme Co\n"
            "Customer Service Department\n"
            "\n"
            "RE: Refund Request - Order #[Order Number]\n"
            "\n"
            "Dear Acme Co Customer Service,\n"
        )

    def test_order_block_placeholders(self, identity, transaction, additional):
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert (
            "Order Details:\n"
            "- Order Number: [Order Number]\n"
            "- Purchase Date: [Date]\n"
            "- Amount Paid: $[Amount]\n"
            "- Product/Service: [Description]"
        ) in letter
        assert "I am requesting a full refund of $[Amount] to my original payment method." in letter

    def test_filled_order(self, identity, additional):
        transaction = TransactionDetails(
            merchant_name="Acme Co",
            transaction_date="2024-01-05",
            transaction_amount="42.50",
            order_number="ORD-123456",
            product_description="Blue kettle",
        )
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert "RE: Refund Request - Order #ORD-123456" in letter
        assert "- Purchase Date: January 5, 2024" in letter
        assert "- Amount Paid: $42.50" in letter
        assert "- Product/Service: Blue kettle" in letter
        assert "full refund of $42.50" in letter

    def test_contact_without_phone(self, identity, transaction, additional):
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert "please contact me at jane@x.com." in letter

    def test_contact_with_phone(self, transaction, additional):
        identity = RequesterIdentity(full_name="Jane Doe", email="jane@x.com", phone="555-0100")
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert letter.startswith("Jane Doe\njane@x.com\n555-0100\n\n")
        assert "please contact me at jane@x.com or 555-0100." in letter

    def test_address_not_rendered(self, transaction, additional):
        identity = RequesterIdentity(full_name="Jane Doe", email="jane@x.com", address="1 Main St")
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert "1 Main St" not in letter
        assert "[Your Address]" not in letter

    def test_processing_boilerplate(self, identity, transaction, additional):
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert "Please process this refund within 10 business days." in letter
        assert "dispute this charge with my credit card company" in letter

    def test_optional_blocks_absent(self, identity, transaction, additional):
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert "Additional Details:" not in letter
        assert "I have previously attempted to resolve this issue:" not in letter

    def test_optional_blocks_present(self, identity, transaction):
        additional = AdditionalInfo(
            additional_details="Box was crushed",
            previous_contact="Called on Jan 5, emailed support",
        )
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert f"Reason for Refund Request:\n{REFUND_REASON}\n\nAdditional Details:\nBox was crushed\n\nI am requesting a full refund" in letter
        assert (
            "I have previously attempted to resolve this issue:\n"
            "Called on Jan 5, emailed support\n\n"
            "Please process this refund"
        ) in letter

    def test_supporting_docs_ignored(self, identity, transaction):
        additional = AdditionalInfo(supporting_docs="Receipt")
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert "Receipt" not in letter
        assert "Enclosures" not in letter

    def test_signature_block(self, identity, transaction, additional):
        letter = render_merchant_refund(identity, transaction, additional, REFUND_REASON, TODAY)
        assert letter.endswith("Thank you for your prompt attention to this matter.\n\nSincerely,\n\nJane Doe")


# =============================================================================
# DISPATCH
# =============================================================================

class TestRendererDispatch:

    def test_one_renderer_per_type(self):
        assert set(RENDERERS) == set(LetterType)
        assert get_renderer(LetterType.BANK_DISPUTE) is render_bank_dispute
        assert get_renderer(LetterType.MERCHANT_REFUND) is render_merchant_refund

    def test_renderers_are_pure(self, identity, transaction, additional):
        for render in RENDERERS.values():
            first = render(identity, transaction, additional, DISPUTE_REASON, TODAY)
            second = render(identity, transaction, additional, DISPUTE_REASON, TODAY)
            assert first == second

    def test_default_today(self, identity, transaction, additional):
        letter = render_bank_dispute(identity, transaction, additional, DISPUTE_REASON)
        assert format_long_date(date.today()) in letter
