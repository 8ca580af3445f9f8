from fastapi import APIRouter
from .health import router as health_router
from .contacts import router as contacts_router
from .form import router as form_router

# Create the main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(health_router, tags=["Health"])
api_router.include_router(contacts_router, tags=["Contacts"])
api_router.include_router(form_router, tags=["Form"])

__all__ = ['api_router']
