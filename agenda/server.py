"""
Contact Agenda API
Main entry point - app factory and startup
"""
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

# Core imports
from agenda import __version__
from agenda.core.config import settings
from agenda.core.logging import logger
from agenda.core.storage import KeyValueStorage, create_storage

# Routes
from agenda.routes import api_router

# Services
from agenda.services.contacts import ContactStore, ContactsController


def create_app(storage: Optional[KeyValueStorage] = None) -> FastAPI:
    """Build the app around one contact store and its controller"""
    app = FastAPI(title="Contact Agenda API", version=__version__)

    store = ContactStore(storage or create_storage(), settings.STORAGE_KEY)
    app.state.store = store
    app.state.controller = ContactsController(store)

    # Include routers
    app.include_router(api_router)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def startup():
        """Application startup handler"""
        logger.info(f"Starting Contact Agenda API ({store.storage.name} storage)...")
        await store.load()
        logger.info("Contact Agenda API started successfully")

    @app.on_event("shutdown")
    async def shutdown():
        """Application shutdown handler"""
        logger.info("Shutting down...")
        await store.storage.close()
        logger.info("Server shutdown complete")

    return app


app = create_app()
