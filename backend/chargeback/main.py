"""
Chargeback Letters - FastAPI Application

Main entry point for the letter generation backend.

Pipeline:
- Form fields → LetterRequest
- LetterRequest → Validator → (errors | valid request)
- Valid request → Template → GeneratedLetter
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .routers import letters_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    yield

# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="Chargeback Letters",
    description="""
    Chargeback Letters - Dispute & Refund Letter Generator

    Builds a ready-to-send plain-text letter from a letter type, a reason
    and the requester's transaction details.

    ## Letter types
    1. **Bank/Card Dispute**: Fair Credit Billing Act dispute to a card issuer
    2. **Merchant Refund Request**: refund request to the merchant directly

    ## Key Principles
    - Catalogs and letter type profiles are read-only
    - Missing optional values render as bracket placeholders
    - Empty optional paragraphs are omitted entirely
    - Nothing is stored between requests
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(letters_router)


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Chargeback Letters",
        "version": "1.0.0",
        "description": "Dispute & Refund Letter Generator",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


# For running with: python -m chargeback.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
