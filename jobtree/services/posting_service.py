"""
Posting Service - job applications, scoped by owner.

Every lookup filters on both _id and userName, so a posting that belongs to
someone else is indistinguishable from one that does not exist.
"""

import logging
from typing import Callable, List

from pymongo import ReturnDocument
from pymongo.collection import Collection

from jobtree.core.errors import NotFoundError
from jobtree.core.security import utcnow
from jobtree.db.mongodb import parse_object_id, serialize_doc, serialize_docs
from jobtree.schemas import Stage

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Posting not found or user not authorized"


class PostingService:
    """
    Handles the postings collection.
    """

    def __init__(self, collection: Collection, clock: Callable = utcnow):
        self.collection = collection
        self.clock = clock

    def _owner_filter(self, posting_id: str, user_name: str) -> dict:
        oid = parse_object_id(posting_id)
        if oid is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return {"_id": oid, "userName": user_name}

    def create(self, user_name: str, job_title: str, company: str, stage: str = Stage.applied.value) -> dict:
        """
        Insert a posting owned by user_name.

        createdAt and lastStageChange both start at the creation time.
        """
        now = self.clock()
        doc = {
            "jobTitle": job_title,
            "company": company,
            "stage": stage,
            "createdAt": now,
            "lastStageChange": now,
            "userName": user_name,
        }
        self.collection.insert_one(doc)
        return serialize_doc(doc)

    def list_for_user(self, user_name: str) -> List[dict]:
        """All postings owned by user_name, in storage order."""
        return serialize_docs(self.collection.find({"userName": user_name}))

    def get(self, posting_id: str, user_name: str) -> dict:
        posting = self.collection.find_one(self._owner_filter(posting_id, user_name))
        if posting is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return serialize_doc(posting)

    def update(self, posting_id: str, user_name: str, changes: dict) -> dict:
        """
        Merge changes into a posting.

        Keys missing from changes (or set to None) keep their stored value.
        lastStageChange moves only when stage actually changes.

        Args:
            changes: any of jobTitle, company, stage
        """
        query = self._owner_filter(posting_id, user_name)
        posting = self.collection.find_one(query)
        if posting is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)

        updates = {}
        for field in ("jobTitle", "company"):
            if changes.get(field) is not None:
                updates[field] = changes[field]

        stage = changes.get("stage")
        if stage is not None and stage != posting.get("stage"):
            updates["stage"] = stage
            updates["lastStageChange"] = self.clock()

        if not updates:
            return serialize_doc(posting)

        updated = self.collection.find_one_and_update(
            query,
            {"$set": updates},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            # Deleted between the read and the write
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return serialize_doc(updated)

    def delete(self, posting_id: str, user_name: str) -> None:
        deleted = self.collection.find_one_and_delete(self._owner_filter(posting_id, user_name))
        if deleted is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("User %s deleted posting %s", user_name, posting_id)
