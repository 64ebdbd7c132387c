from typing import List, Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


# Single-entity envelope: {success, data}
class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T


# List envelope: used by all list endpoints
class ListResponse(BaseModel, Generic[T]):
    success: bool = True
    count: int
    data: List[T]

    @classmethod
    def of(cls, items: list) -> "ListResponse[T]":
        return cls(count=len(items), data=items)


# Returned by deletes
class MessageResponse(BaseModel):
    success: bool = True
    message: str


# Error envelope: {success: false, message, errors?}
class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[List[FieldError]] = None


# Documented on every versioned route
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation or business-rule violation"},
    401: {"model": ErrorResponse, "description": "Missing or invalid token"},
    403: {"model": ErrorResponse, "description": "Not allowed for this user"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}
