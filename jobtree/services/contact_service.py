"""
Contact Service - networking contacts, scoped by owner like postings.
"""

import logging
from typing import List

from pymongo import ReturnDocument
from pymongo.collection import Collection

from jobtree.core.errors import NotFoundError
from jobtree.db.mongodb import parse_object_id, serialize_doc, serialize_docs

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Contact not found or user not authorized"
UPDATABLE_FIELDS = ("name", "company", "notes")


class ContactService:

    def __init__(self, collection: Collection):
        self.collection = collection

    def _owner_filter(self, contact_id: str, user_name: str) -> dict:
        oid = parse_object_id(contact_id)
        if oid is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return {"_id": oid, "userName": user_name}

    def create(self, user_name: str, name: str, company: str, notes: str = "") -> dict:
        doc = {
            "name": name,
            "company": company,
            "notes": notes,
            "userName": user_name,
        }
        self.collection.insert_one(doc)
        return serialize_doc(doc)

    def list_for_user(self, user_name: str) -> List[dict]:
        return serialize_docs(self.collection.find({"userName": user_name}))

    def get(self, contact_id: str, user_name: str) -> dict:
        contact = self.collection.find_one(self._owner_filter(contact_id, user_name))
        if contact is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return serialize_doc(contact)

    def update(self, contact_id: str, user_name: str, changes: dict) -> dict:
        """Overwrite the fields present in changes; the rest stay as stored."""
        updates = {
            field: changes[field]
            for field in UPDATABLE_FIELDS
            if changes.get(field) is not None
        }
        query = self._owner_filter(contact_id, user_name)

        if not updates:
            return self.get(contact_id, user_name)

        updated = self.collection.find_one_and_update(
            query,
            {"$set": updates},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return serialize_doc(updated)

    def delete(self, contact_id: str, user_name: str) -> None:
        deleted = self.collection.find_one_and_delete(self._owner_filter(contact_id, user_name))
        if deleted is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("User %s deleted contact %s", user_name, contact_id)
