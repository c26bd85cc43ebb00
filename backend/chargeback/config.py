"""
Chargeback Letters - Configuration
Values read from the environment once at import time.
"""
import os

# Root log level applied by the FastAPI lifespan
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Character cap on the free-text "Additional Details" block; API input
# beyond it is truncated, the engine itself never rejects long text
ADDITIONAL_DETAILS_MAX_LENGTH = int(os.getenv("ADDITIONAL_DETAILS_MAX_LENGTH", "500"))

# Comma-separated list, "*" allows any origin (embedded widget default)
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
