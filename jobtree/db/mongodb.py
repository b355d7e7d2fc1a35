"""
MongoDB Connection Utility

MongoDB stores:
- users: credentials and access tokens
- postings: tracked job applications
- contacts: networking contacts

Each posting and contact carries a userName back-reference to its owner;
every query on those collections filters on it.
"""
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "postings": "postings",
    "contacts": "contacts",
}


def create_mongo_client(mongo_url: str) -> MongoClient:
    """
    Create a MongoDB client (connection pooling handled internally by pymongo).
    Datetimes come back as UTC-aware values, the same as the ones written.
    """
    return MongoClient(mongo_url, tz_aware=True)


def test_mongo_connection(client: MongoClient) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        client.admin.command("ping")
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes. Unique indexes on users back the name/email conflict
    check and the token lookup. Call this once during app startup.
    """
    users = db[COLLECTIONS["users"]]
    users.create_index([("name", ASCENDING)], unique=True)
    users.create_index([("email", ASCENDING)], unique=True)
    users.create_index([("accessToken", ASCENDING)], unique=True)

    db[COLLECTIONS["postings"]].create_index([("userName", ASCENDING)])
    db[COLLECTIONS["contacts"]].create_index([("userName", ASCENDING)])

    logger.info("MongoDB indexes created")


# ============================================================
# HELPERS: ObjectId <-> string
# ============================================================

def parse_object_id(value: str) -> Optional[ObjectId]:
    """Return the ObjectId for a path id, or None if it is not a valid id."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs) -> list:
    """Convert an iterable of MongoDB documents to a JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]
