"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# ENUMS
# ============================================================

class Stage(str, Enum):
    applied = "applied"
    interview = "interview"
    offer = "offer"
    rejected = "rejected"


# ============================================================
# USER SCHEMAS
# ============================================================

class UserCreate(CamelModel):
    user: str = Field(..., min_length=1)
    email: str
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError(f"{v} is not a valid email address")
        return v


class UserResponse(CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    email: str
    access_token: str
    access_token_expires_at: datetime


class LoginRequest(CamelModel):
    password: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    user_name: str
    access_token: str


class CurrentUser(BaseModel):
    """Identity attached to an authenticated request."""
    name: str
    email: str


# ============================================================
# POSTING SCHEMAS
# ============================================================

class PostingCreate(CamelModel):
    job_title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    stage: Stage = Stage.applied


class PostingUpdate(CamelModel):
    """Fields left out of the request (or sent as null) keep their stored value."""
    job_title: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = Field(None, min_length=1)
    stage: Optional[Stage] = None


class PostingResponse(CamelModel):
    id: str = Field(..., alias="_id")
    job_title: str
    company: str
    stage: Stage
    created_at: datetime
    last_stage_change: datetime
    user_name: str


# ============================================================
# CONTACT SCHEMAS
# ============================================================

class ContactCreate(CamelModel):
    name: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    notes: str = ""


class ContactUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = None


class ContactResponse(CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    company: str
    notes: str = ""
    user_name: str


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    mongodb: str
