"""
Standardized API response models.
Provides consistent response formatting across all endpoints.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar, Union
from pydantic import BaseModel, Field
from datetime import datetime

from domain.enums import UpsertAction

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Generic API response wrapper"""

    success: bool = Field(..., description="Indicates if the operation was successful")
    message: Optional[str] = Field(None, description="Human-readable message")
    data: Optional[T] = Field(None, description="Response payload")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Response timestamp"
    )

    model_config = {"from_attributes": True}


class UpsertResponse(APIResponse[T], Generic[T]):
    """Response to a save: whether the record was created or updated"""

    action: UpsertAction = Field(..., description="created or updated")


class FieldError(BaseModel):
    """Localized validation failure for one field"""

    field: str = Field(..., description="Dotted path of the field (items.0.amount)")
    message: str = Field(..., description="Localized error message")
    type: Optional[str] = Field(None, description="Validator error type")


class ErrorDetail(BaseModel):
    """Detailed error information"""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[Union[List[FieldError], Dict[str, Any]]] = Field(
        None, description="Failing fields, or extra context for the error"
    )


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Error timestamp"
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="Check timestamp"
    )


# Error bodies documented on the record routers
ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "No record for the key"},
    422: {"model": ErrorResponse, "description": "Validation failed"},
    503: {"model": ErrorResponse, "description": "Database unavailable"},
}


def upsert_response(data: Any, action: UpsertAction, message: str) -> dict:
    """Create a standardized save response"""
    return {
        "success": True,
        "message": message,
        "action": action,
        "data": data,
        "timestamp": datetime.utcnow(),
    }


def error_response(code: str, message: str, details: Any = None) -> dict:
    """Create a standardized error response body"""
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details)
    )
    return body.model_dump(mode="json", exclude_none=True)


__all__ = [
    "APIResponse",
    "UpsertResponse",
    "FieldError",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "ERROR_RESPONSES",
    "upsert_response",
    "error_response",
]
