"""
User Routes

POST /users - Sign up, returns the user with its access token
POST /users/{user_name} - Log in, returns the access token
"""

from fastapi import APIRouter, Depends

from jobtree.db.context import AppContext, get_context
from jobtree.schemas import ErrorResponse, LoginRequest, LoginResponse, UserCreate, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
def create_user(body: UserCreate, context: AppContext = Depends(get_context)):
    """
    Register a new user.

    The response carries the access token; send it in the Authorization
    header on every postings/contacts request.
    """
    return context.users.create_user(body.user, body.email, body.password)


@router.post(
    "/{user_name}",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
)
def login(user_name: str, body: LoginRequest, context: AppContext = Depends(get_context)):
    """Log in and receive the access token issued at signup."""
    return context.users.login(user_name, body.password)
