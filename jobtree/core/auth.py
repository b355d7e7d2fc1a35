"""
Authentication dependency for protected routes.

The bearer token is read from the Authorization header, either bare
("Authorization: <token>") or with the scheme ("Authorization: Bearer <token>").
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import APIKeyHeader

from jobtree.db.context import AppContext, get_context
from jobtree.schemas import CurrentUser

# Header extractor; missing header is handled by the service (401, not 403)
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def extract_token(header_value: Optional[str]) -> Optional[str]:
    if not header_value:
        return None
    value = header_value.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == "bearer" and rest:
        return rest.strip()
    return value


def get_current_user(
    authorization: Optional[str] = Depends(authorization_header),
    context: AppContext = Depends(get_context),
) -> CurrentUser:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @router.get("/protected")
        def route(user: CurrentUser = Depends(get_current_user)):
            return user
    """
    return context.users.authenticate(extract_token(authorization))
