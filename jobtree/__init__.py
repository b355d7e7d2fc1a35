"""
JobTree API
A small job-application and networking-contact tracker.

Architecture:
- FastAPI: HTTP routing, validation, dependency injection
- MongoDB: users, postings and contacts (one collection each)
- Opaque bearer tokens: issued once at signup, checked on every resource route
"""

__version__ = "1.0.0"
