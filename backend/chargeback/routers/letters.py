"""
Chargeback Letters - Letters API Router

Exposes the letter engine to the form front end:
- letter type and reason catalogs (to populate the pickers and tips panel)
- letter generation
- export filename suggestion

Nothing is persisted; every request is independent.
"""
from __future__ import annotations
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field, field_validator

from .. import config
from ..models import AdditionalInfo, LetterRequest, RequesterIdentity, TransactionDetails
from ..services.letter_engine import (
    InvalidLetterType,
    LetterValidationError,
    generate_letter,
    get_letter_type_profile,
    list_letter_types,
    list_reasons,
    suggest_filename,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/letters", tags=["letters"])


# =============================================================================
# PYDANTIC MODELS FOR API
# =============================================================================

class IdentityPayload(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


class TransactionPayload(BaseModel):
    merchant_name: str = ""
    transaction_date: str = ""  # ISO-8601, e.g. "2024-01-05"
    transaction_amount: str = ""  # Free text, rendered verbatim
    order_number: str = ""
    product_description: str = ""
    account_last4: str = ""
    card_type: str = ""
    bank_name: str = ""
    bank_address: str = ""


class AdditionalPayload(BaseModel):
    additional_details: str = ""
    supporting_docs: str = ""
    previous_contact: str = ""

    @field_validator('additional_details')
    @classmethod
    def cap_additional_details(cls, v):
        # Same cap as the form textarea: longer input is cut, never rejected
        return v[:config.ADDITIONAL_DETAILS_MAX_LENGTH]


class GenerateLetterRequest(BaseModel):
    letter_type: str
    reason: Optional[str] = None
    identity: IdentityPayload = Field(default_factory=IdentityPayload)
    transaction: TransactionPayload = Field(default_factory=TransactionPayload)
    additional: AdditionalPayload = Field(default_factory=AdditionalPayload)
    today: Optional[date] = None  # Override header date (previews, tests)


class GenerateLetterResponse(BaseModel):
    content: str
    letter_type: str
    reason_key: str
    filename: str
    word_count: int
    generated_on: date


class ReasonResponse(BaseModel):
    key: str
    name: str
    description: str
    tips: List[str]


class LetterTypeResponse(BaseModel):
    letter_type: str
    name: str
    description: str
    icon: str
    reason_catalog: str
    reason_label: str
    required_fields: List[str]
    optional_fields: List[str]


class FilenameResponse(BaseModel):
    filename: str


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def to_letter_request(payload: GenerateLetterRequest) -> LetterRequest:
    """Map the API payload onto the engine's field groups."""
    return LetterRequest(
        letter_type=payload.letter_type,
        reason=payload.reason,
        identity=RequesterIdentity(**payload.identity.model_dump()),
        transaction=TransactionDetails(**payload.transaction.model_dump()),
        additional=AdditionalInfo(**payload.additional.model_dump()),
    )


def _profile_or_404(letter_type: str):
    try:
        return get_letter_type_profile(letter_type)
    except InvalidLetterType as e:
        logger.warning(f"Unknown letter type requested: {letter_type!r}")
        raise HTTPException(status_code=404, detail=e.to_dict())


# =============================================================================
# API ENDPOINTS
# =============================================================================

@router.get("/types", response_model=List[LetterTypeResponse])
async def get_letter_types():
    """List supported letter types with their field sets."""
    return [profile.to_dict() for profile in list_letter_types()]


@router.get("/types/{letter_type}/reasons", response_model=List[ReasonResponse])
async def get_reasons(letter_type: str):
    """List the reasons available for a letter type, in picker order."""
    profile = _profile_or_404(letter_type)
    return [reason.to_dict() for _, reason in list_reasons(profile.reason_catalog)]


@router.post("/generate", response_model=GenerateLetterResponse)
async def generate(payload: GenerateLetterRequest):
    """
    Generate a letter.

    Returns 422 with {code, field, message} when a required field or the
    reason is missing or mismatched.
    """
    try:
        letter = generate_letter(to_letter_request(payload), today=payload.today)
    except LetterValidationError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())

    return GenerateLetterResponse(
        content=letter.content,
        letter_type=letter.letter_type.value,
        reason_key=letter.reason_key,
        filename=letter.filename,
        word_count=letter.word_count,
        generated_on=letter.generated_on,
    )


@router.get("/filename", response_model=FilenameResponse)
async def get_filename(
    letter_type: str = Query(...),
    merchant_name: str = Query(...),
):
    """Suggested export filename for a letter."""
    profile = _profile_or_404(letter_type)
    return FilenameResponse(filename=suggest_filename(profile.letter_type, merchant_name))
