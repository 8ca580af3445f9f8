"""Contacts routes"""
from fastapi import APIRouter, Depends
from typing import List
from agenda.core.exceptions import NotFoundException
from agenda.models.contact import Contact, ContactCreate
from agenda.services.contacts import ContactStore
from .deps import get_store

router = APIRouter(prefix="/contacts")


@router.get("", response_model=List[Contact])
async def get_contacts(store: ContactStore = Depends(get_store)):
    """Get all contacts"""
    return store.list()


@router.get("/{contact_id}", response_model=Contact)
async def get_contact(contact_id: str, store: ContactStore = Depends(get_store)):
    """Get a single contact"""
    contact = store.get(contact_id)
    if not contact:
        raise NotFoundException("Contact")
    return contact


@router.post("", response_model=Contact)
async def create_contact(data: ContactCreate, store: ContactStore = Depends(get_store)):
    """Create a new contact"""
    contact = store.add(data.name, data.phone)
    await store.save()
    return contact


@router.put("/{contact_id}")
async def update_contact(contact_id: str, data: ContactCreate, store: ContactStore = Depends(get_store)):
    """Update a contact. Unknown ids are ignored."""
    store.update(contact_id, data.name, data.phone)
    await store.save()
    return {"success": True}


@router.delete("/{contact_id}")
async def delete_contact(contact_id: str, store: ContactStore = Depends(get_store)):
    """Delete a contact. Unknown ids are ignored."""
    store.delete(contact_id)
    await store.save()
    return {"success": True}
