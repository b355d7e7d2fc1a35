"""
Posting Routes

POST /postings - Create posting
GET /postings/user - List my postings
GET /postings/{posting_id} - Get one of my postings
PUT /postings/{posting_id} - Update one of my postings
DELETE /postings/{posting_id} - Delete one of my postings
"""

from typing import List

from fastapi import APIRouter, Depends

from jobtree.core.auth import get_current_user
from jobtree.db.context import AppContext, get_context
from jobtree.schemas import (
    CurrentUser, ErrorResponse, PostingCreate, PostingResponse, PostingUpdate, SuccessResponse
)

router = APIRouter(
    prefix="/postings",
    tags=["Postings"],
    responses={401: {"model": ErrorResponse}},
)


@router.post("", response_model=PostingResponse, status_code=201)
def create_posting(
    body: PostingCreate,
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    """Create a posting owned by the caller. Any userName in the body is ignored."""
    return context.postings.create(
        user.name, body.job_title, body.company, stage=body.stage.value
    )


@router.get("/user", response_model=List[PostingResponse])
def list_my_postings(
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    return context.postings.list_for_user(user.name)


@router.get("/{posting_id}", response_model=PostingResponse, responses={404: {"model": ErrorResponse}})
def get_posting(
    posting_id: str,
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    return context.postings.get(posting_id, user.name)


@router.put("/{posting_id}", response_model=PostingResponse, responses={404: {"model": ErrorResponse}})
def update_posting(
    posting_id: str,
    body: PostingUpdate,
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    """Partial update: only fields sent in the body change."""
    changes = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return context.postings.update(posting_id, user.name, changes)


@router.delete("/{posting_id}", response_model=SuccessResponse, responses={404: {"model": ErrorResponse}})
def delete_posting(
    posting_id: str,
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    context.postings.delete(posting_id, user.name)
    return SuccessResponse()
