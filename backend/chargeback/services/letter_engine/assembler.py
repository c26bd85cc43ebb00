"""
Letter Engine - Letter Assembly

Pipeline:
    LetterRequest → validate → resolve reason → render → GeneratedLetter

The assembler holds no state between calls. Identical requests with the
same `today` always produce byte-identical letters.
"""
from __future__ import annotations
import logging
import re
from datetime import date
from typing import Optional, Tuple, Union

from ...models.letters import GeneratedLetter, LetterRequest, LetterType
from .letter_types import get_letter_type, get_letter_type_profile
from .reasons import get_reason
from .templates import get_renderer
from .validators import ValidationResult, resolve_reason, validate

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def suggest_filename(letter_type: Union[LetterType, str], merchant_name: str) -> str:
    """
    Export filename for a letter.

    "{dispute|refund}-letter-{merchant name lowercased, whitespace runs → -}.txt"
    """
    prefix = get_letter_type_profile(letter_type).filename_prefix
    slug = _WHITESPACE.sub("-", (merchant_name or "").lower())
    return f"{prefix}-letter-{slug}.txt"


def reason_tips(letter_type: Union[LetterType, str], reason_key: str) -> Tuple[str, ...]:
    """Guidance tips for a reason, looked up in the letter type's catalog."""
    profile = get_letter_type_profile(letter_type)
    return get_reason(profile.reason_catalog, reason_key).tips


class LetterAssembler:
    """
    Validate a LetterRequest and render it with its letter type's template.

    Input: LetterRequest
    Output: GeneratedLetter

    Raises the first LetterValidationError when the request is incomplete;
    no partial letter is ever produced.
    """

    def check(self, request: LetterRequest) -> ValidationResult:
        """Run validation without rendering."""
        return validate(
            request.letter_type,
            request.reason,
            request.identity,
            request.transaction,
            request.additional,
        )

    def generate(self, request: LetterRequest, today: Optional[date] = None) -> GeneratedLetter:
        """
        Generate a letter.

        Args:
            request: LetterRequest from the presentation layer
            today: Header date; defaults to the current date

        Returns:
            GeneratedLetter with the rendered text and suggested filename
        """
        result = self.check(request)
        if not result.is_valid:
            logger.warning(
                f"Rejected letter request: {len(result.errors)} error(s), "
                f"first={result.first_error.code} field={result.first_error.field}"
            )
            result.raise_for_errors()

        letter_type = get_letter_type(request.letter_type)
        reason = resolve_reason(letter_type, request.reason)
        today = today or date.today()

        render = get_renderer(letter_type)
        content = render(
            request.identity,
            request.transaction,
            request.additional,
            reason.display_text,
            today,
        )

        letter = GeneratedLetter(
            content=content,
            letter_type=letter_type,
            reason_key=reason.key,
            generated_on=today,
            filename=suggest_filename(letter_type, request.transaction.merchant_name),
        )

        logger.info(f"Generated {letter_type.value} letter: reason={reason.key}, {letter.word_count} words")
        return letter


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

_assembler: Optional[LetterAssembler] = None


def get_assembler() -> LetterAssembler:
    """Get or create the default letter assembler singleton."""
    global _assembler
    if _assembler is None:
        _assembler = LetterAssembler()
    return _assembler


def generate_letter(request: LetterRequest, today: Optional[date] = None) -> GeneratedLetter:
    """Convenience function to generate a letter with the default assembler."""
    return get_assembler().generate(request, today=today)
