"""
Schemas module - Request/Response schemas for API endpoints.

Field names are snake_case in Python and camelCase on the wire, matching the
keys stored in MongoDB.
"""

from jobtree.schemas.schemas import (
    Stage,
    UserCreate, UserResponse, LoginRequest, LoginResponse, CurrentUser,
    PostingCreate, PostingUpdate, PostingResponse,
    ContactCreate, ContactUpdate, ContactResponse,
    SuccessResponse, ErrorResponse, HealthResponse,
)

__all__ = [
    "Stage",
    "UserCreate", "UserResponse", "LoginRequest", "LoginResponse", "CurrentUser",
    "PostingCreate", "PostingUpdate", "PostingResponse",
    "ContactCreate", "ContactUpdate", "ContactResponse",
    "SuccessResponse", "ErrorResponse", "HealthResponse",
]
