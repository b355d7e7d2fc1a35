"""
Services module - one repository class per MongoDB collection.
"""
from jobtree.services.user_service import UserService
from jobtree.services.posting_service import PostingService
from jobtree.services.contact_service import ContactService

__all__ = ["UserService", "PostingService", "ContactService"]
