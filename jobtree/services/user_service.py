"""
User Service - credential store and token authenticator.

Users are created once with a bcrypt-hashed password and an opaque access
token. Login hands back the stored token; it is replaced only after it has
expired.
"""

import logging
from datetime import timedelta
from typing import Callable, Optional

from passlib.context import CryptContext
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from jobtree.core.errors import AuthenticationError, ConflictError
from jobtree.core.security import generate_access_token, utcnow
from jobtree.db.mongodb import serialize_doc
from jobtree.schemas import CurrentUser

logger = logging.getLogger(__name__)


class UserService:
    """
    Handles the users collection.
    """

    def __init__(
        self,
        collection: Collection,
        pwd_context: CryptContext,
        token_bytes: int = 128,
        token_ttl: timedelta = timedelta(days=3650),
        clock: Callable = utcnow,
    ):
        self.collection = collection
        self.pwd_context = pwd_context
        self.token_bytes = token_bytes
        self.token_ttl = token_ttl
        self.clock = clock

    def _new_token(self) -> dict:
        return {
            "accessToken": generate_access_token(self.token_bytes),
            "accessTokenExpiresAt": self.clock() + self.token_ttl,
        }

    def create_user(self, name: str, email: str, password: str) -> dict:
        """
        Insert a new user and return it without the password hash.

        Raises:
            ConflictError: name or email already registered
        """
        doc = {
            "name": name,
            "email": email,
            "password": self.pwd_context.hash(password),
            **self._new_token(),
        }
        try:
            self.collection.insert_one(doc)
        except DuplicateKeyError:
            logger.info("Signup rejected for %s: name or email taken", name)
            raise ConflictError("User name or email already exists")

        logger.info("Created user %s", name)
        doc.pop("password")
        return serialize_doc(doc)

    def login(self, name: str, password: str) -> dict:
        """
        Check credentials and return {"userName", "accessToken"}.

        Unknown names and wrong passwords fail the same way.
        """
        user = self.collection.find_one({"name": name})
        if user is None:
            # Spend the same hashing time as a real check
            self.pwd_context.dummy_verify()
            logger.warning("Login failed for %s", name)
            raise AuthenticationError("Invalid user name or password")
        if not self.pwd_context.verify(password, user["password"]):
            logger.warning("Login failed for %s", name)
            raise AuthenticationError("Invalid user name or password")

        token = user["accessToken"]
        if self._is_expired(user):
            fresh = self._new_token()
            self.collection.update_one({"_id": user["_id"]}, {"$set": fresh})
            token = fresh["accessToken"]
            logger.info("Issued new access token for %s after expiry", name)

        logger.info("User %s logged in", name)
        return {"userName": user["name"], "accessToken": token}

    def authenticate(self, token: Optional[str]) -> CurrentUser:
        """Resolve a bearer token to its user, or raise AuthenticationError."""
        if not token:
            raise AuthenticationError("Missing access token")

        user = self.collection.find_one({"accessToken": token})
        if user is None or self._is_expired(user):
            logger.info("Rejected unknown or expired access token")
            raise AuthenticationError("Invalid or expired access token")

        return CurrentUser(name=user["name"], email=user["email"])

    def _is_expired(self, user: dict) -> bool:
        expires_at = user.get("accessTokenExpiresAt")
        if expires_at is None:
            return False
        return expires_at <= self.clock()
