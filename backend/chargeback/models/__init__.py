"""Chargeback Letters - Data Models"""
from .letters import (
    # Enums
    LetterType, ReasonCatalogId,
    # Catalog records
    Reason,
    # Field groups
    RequesterIdentity, TransactionDetails, AdditionalInfo,
    # Engine input / output
    LetterRequest, GeneratedLetter,
)

__all__ = [
    "LetterType", "ReasonCatalogId",
    "Reason",
    "RequesterIdentity", "TransactionDetails", "AdditionalInfo",
    "LetterRequest", "GeneratedLetter",
]
