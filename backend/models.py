"""
Pydantic API Models

Request/response models for the backend API.
"""

from pydantic import BaseModel, Field
from typing import Any, List, Optional


class ValidateRequest(BaseModel):
    """Request to check one value against a field type."""
    type: str = Field(..., description="Field type identifier, e.g. post_code")
    value: Optional[Any] = Field(None, description="Value to check; null or empty always passes")


class ValidateResponse(BaseModel):
    """Verdict for one value."""
    type: str
    valid: bool
    normalized_value: Optional[str] = None


class BatchValidateRequest(BaseModel):
    """Request to check several values in one call."""
    items: List[ValidateRequest] = Field(..., description="Values to check, in order")


class BatchValidateResponse(BaseModel):
    """Verdicts in request order."""
    results: List[ValidateResponse]
    valid: bool


class FieldTypeInfo(BaseModel):
    """Rule summary for one field type."""
    type: str
    pattern: str
    polarity: str
    unicode: bool
    ignore_case: bool
    normalized: bool


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    field_type_count: int
