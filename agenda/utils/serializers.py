"""Contact collection serialization"""
import json
from typing import List

from pydantic import ValidationError

from agenda.models.contact import Contact


def dump_contacts(contacts: List[Contact]) -> str:
    """Serialize a contact collection to a JSON array"""
    return json.dumps([c.model_dump() for c in contacts], ensure_ascii=False)


def parse_contacts(blob: str) -> List[Contact]:
    """Parse a JSON array of contacts, raising ValueError on any malformed entry"""
    data = json.loads(blob)
    if not isinstance(data, list):
        raise ValueError('Stored contacts must be a JSON array')

    contacts = []
    seen = set()
    for item in data:
        # Stored ids are never regenerated
        if not isinstance(item, dict) or 'id' not in item:
            raise ValueError(f'Stored contact has no id: {item!r}')
        try:
            contact = Contact(**item)
        except ValidationError as e:
            raise ValueError(f'Malformed contact entry: {e}') from e
        if contact.id in seen:
            raise ValueError(f'Duplicate contact id: {contact.id}')
        seen.add(contact.id)
        contacts.append(contact)
    return contacts
