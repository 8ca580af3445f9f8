"""Contact collection and its persistence"""
from typing import List, Optional
import uuid

from agenda.core.config import STORAGE_KEY
from agenda.core.exceptions import StorageError
from agenda.core.logging import logger
from agenda.core.storage import KeyValueStorage
from agenda.models.contact import Contact
from agenda.utils.serializers import dump_contacts, parse_contacts


class ContactStore:
    """Owns the canonical contact list.

    Mutations only touch memory; callers persist with ``save()`` after
    each one. Names and phones are stored as given, validation belongs
    to whoever calls ``add`` or ``update``.
    """

    def __init__(self, storage: KeyValueStorage, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._contacts: List[Contact] = []

    def _new_id(self) -> str:
        existing = {c.id for c in self._contacts}
        while True:
            contact_id = str(uuid.uuid4())
            if contact_id not in existing:
                return contact_id

    def add(self, name: str, phone: str) -> Contact:
        """Append a new contact with a fresh id"""
        contact = Contact(id=self._new_id(), name=name, phone=phone)
        self._contacts = self._contacts + [contact]
        return contact

    def list(self) -> List[Contact]:
        """All contacts in insertion order"""
        return list(self._contacts)

    def get(self, contact_id: str) -> Optional[Contact]:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def update(self, contact_id: str, name: str, phone: str) -> None:
        """Replace name and phone of a contact, ignoring unknown ids"""
        self._contacts = [
            c.model_copy(update={"name": name, "phone": phone}) if c.id == contact_id else c
            for c in self._contacts
        ]

    def delete(self, contact_id: str) -> None:
        """Remove a contact, ignoring unknown ids"""
        self._contacts = [c for c in self._contacts if c.id != contact_id]

    async def save(self) -> None:
        """Overwrite the storage slot with the whole collection"""
        try:
            await self.storage.set_item(self.key, dump_contacts(self._contacts))
        except StorageError as e:
            logger.error(f"Could not save contacts: {e}")

    async def load(self) -> None:
        """Replace the collection with the stored one, or empty it"""
        try:
            blob = await self.storage.get_item(self.key)
        except StorageError as e:
            logger.warning(f"Could not read saved contacts, starting empty: {e}")
            self._contacts = []
            return

        if blob is None:
            self._contacts = []
            return

        try:
            self._contacts = parse_contacts(blob)
        except ValueError as e:
            # Malformed data is dropped on purpose; the log line is the only report
            logger.warning(f"Discarding unreadable saved contacts: {e}")
            self._contacts = []
            return
        logger.info(f"Loaded {len(self._contacts)} contacts")
