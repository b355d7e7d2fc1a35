"""
Contact Routes

GET /contacts - List my contacts
POST /contacts - Add contact
GET /contacts/{contact_id} - Get one of my contacts
PUT /contacts/{contact_id} - Update one of my contacts
DELETE /contacts/{contact_id} - Delete one of my contacts
"""

from typing import List

from fastapi import APIRouter, Depends

from jobtree.core.auth import get_current_user
from jobtree.db.context import AppContext, get_context
from jobtree.schemas import (
    ContactCreate, ContactResponse, ContactUpdate, CurrentUser, ErrorResponse, SuccessResponse
)

router = APIRouter(
    prefix="/contacts",
    tags=["Contacts"],
    responses={401: {"model": ErrorResponse}},
)


@router.get("", response_model=List[ContactResponse])
def list_my_contacts(
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    return context.contacts.list_for_user(user.name)


@router.post("", response_model=ContactResponse, status_code=201)
def create_contact(
    body: ContactCreate,
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    return context.contacts.create(user.name, body.name, body.company, notes=body.notes)


@router.get("/{contact_id}", response_model=ContactResponse, responses={404: {"model": ErrorResponse}})
def get_contact(
    contact_id: str,
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    return context.contacts.get(contact_id, user.name)


@router.put("/{contact_id}", response_model=ContactResponse, responses={404: {"model": ErrorResponse}})
def update_contact(
    contact_id: str,
    body: ContactUpdate,
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    changes = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return context.contacts.update(contact_id, user.name, changes)


@router.delete("/{contact_id}", response_model=SuccessResponse, responses={404: {"model": ErrorResponse}})
def delete_contact(
    contact_id: str,
    user: CurrentUser = Depends(get_current_user),
    context: AppContext = Depends(get_context),
):
    context.contacts.delete(contact_id, user.name)
    return SuccessResponse()
