"""Health check routes"""
from fastapi import APIRouter, Depends
from agenda import __version__
from agenda.services.contacts import ContactStore
from .deps import get_store

router = APIRouter()


@router.get("/")
async def root():
    """API root - health check"""
    return {"message": "Contact Agenda API", "version": __version__, "status": "running"}


@router.get("/health")
async def health_check(store: ContactStore = Depends(get_store)):
    """Detailed health check"""
    health = {
        "status": "healthy",
        "api": True,
        "storage": store.storage.name,
        "storage_ok": await store.storage.ping(),
        "contacts": len(store.list())
    }
    if not health["storage_ok"]:
        health["status"] = "degraded"
    return health
