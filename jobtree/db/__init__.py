"""
Database module - MongoDB connection helpers.

The per-app context lives in jobtree.db.context.
"""
from jobtree.db.mongodb import create_mongo_client, init_mongo_indexes, test_mongo_connection

__all__ = [
    "create_mongo_client",
    "init_mongo_indexes",
    "test_mongo_connection",
]
