"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from jobtree.api.routes.user_routes import router as user_router
from jobtree.api.routes.posting_routes import router as posting_router
from jobtree.api.routes.contact_routes import router as contact_router

# Main API router
api_router = APIRouter()

api_router.include_router(user_router)
api_router.include_router(posting_router)
api_router.include_router(contact_router)
