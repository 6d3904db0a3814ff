"""
Backend API Service

FastAPI application exposing the field type matcher over HTTP.

Error mapping:
- unknown field type  -> 400 with the list of defined types
- non-string value    -> 422
- regex engine failure -> 500
"""

import logging
import sys
from pathlib import Path
from typing import List

from fastapi import FastAPI, HTTPException

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from backend.config import (
    API_TITLE, API_DESCRIPTION, API_VERSION,
    BACKEND_HOST, BACKEND_PORT, MAX_BATCH_ITEMS,
    LOG_LEVEL, VERBOSE,
)
from backend.models import (
    ValidateRequest, ValidateResponse,
    BatchValidateRequest, BatchValidateResponse,
    FieldTypeInfo, HealthResponse,
)
from fieldcheck import (
    InvalidInputError,
    PatternEngineError,
    UnknownTypeError,
    get_matcher,
)

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if VERBOSE else LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
)

matcher = get_matcher()


def _check(item: ValidateRequest) -> ValidateResponse:
    try:
        outcome = matcher.validate(item.type, item.value)
    except UnknownTypeError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": str(e), "defined_types": e.defined_types},
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail={"error": str(e)})
    except PatternEngineError as e:
        logger.error(f"Pattern engine failure for type {item.type}: {e}")
        raise HTTPException(status_code=500, detail={"error": str(e)})

    return ValidateResponse(
        type=item.type,
        valid=outcome.valid,
        normalized_value=outcome.normalized_value,
    )


# =========================================================================
# Health & Introspection
# =========================================================================

@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(version=API_VERSION, field_type_count=len(matcher.rules))


@app.get("/types", response_model=List[FieldTypeInfo])
async def list_types():
    """Every field type with a summary of its rule."""
    return [
        FieldTypeInfo(
            type=field_type.value,
            pattern=rule.pattern,
            polarity=rule.polarity.value,
            unicode=rule.unicode,
            ignore_case=rule.ignore_case,
            normalized=rule.normalized,
        )
        for field_type, rule in matcher.rules.items()
    ]


# =========================================================================
# Validation
# =========================================================================

@app.post("/validate", response_model=ValidateResponse)
async def validate(request: ValidateRequest):
    """Check one value against a field type."""
    return _check(request)


@app.post("/validate/batch", response_model=BatchValidateResponse)
async def validate_batch(request: BatchValidateRequest):
    """Check several values; any failing item fails the whole request."""
    if len(request.items) > MAX_BATCH_ITEMS:
        raise HTTPException(
            status_code=413,
            detail={"error": f"At most {MAX_BATCH_ITEMS} items per batch"},
        )

    results = [_check(item) for item in request.items]
    return BatchValidateResponse(
        results=results,
        valid=all(result.valid for result in results),
    )


# =========================================================================
# Run
# =========================================================================

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting backend on {BACKEND_HOST}:{BACKEND_PORT}")
    uvicorn.run(app, host=BACKEND_HOST, port=BACKEND_PORT)
