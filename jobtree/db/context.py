"""
Application context - everything a request handler needs, built once at
startup and stored on app.state instead of in module globals.
"""
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database

from jobtree.core.config import Settings
from jobtree.core.security import create_password_context
from jobtree.db.mongodb import COLLECTIONS, create_mongo_client
from jobtree.services import ContactService, PostingService, UserService


@dataclass
class AppContext:
    settings: Settings
    client: MongoClient
    db: Database
    users: UserService
    postings: PostingService
    contacts: ContactService


def build_context(settings: Settings, client: Optional[MongoClient] = None) -> AppContext:
    """
    Wire the MongoDB client and the repositories together.

    Args:
        settings: application settings
        client: existing client to use instead of connecting to settings.mongo_url
    """
    if client is None:
        client = create_mongo_client(settings.mongo_url)
    db = client[settings.database_name]

    users = UserService(
        db[COLLECTIONS["users"]],
        create_password_context(settings.bcrypt_rounds),
        token_bytes=settings.access_token_bytes,
        token_ttl=timedelta(days=settings.access_token_ttl_days),
    )
    return AppContext(
        settings=settings,
        client=client,
        db=db,
        users=users,
        postings=PostingService(db[COLLECTIONS["postings"]]),
        contacts=ContactService(db[COLLECTIONS["contacts"]]),
    )


def get_context(request: Request) -> AppContext:
    """FastAPI dependency - the context of the app serving this request."""
    return request.app.state.context
