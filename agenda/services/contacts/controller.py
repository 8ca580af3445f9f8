"""Form and list controller: applies user commands to the contact store"""
from typing import Dict

from agenda.core.logging import logger
from agenda.models.commands import (
    Command, DeleteContact, EditInput, InputName, InputPhone, Submit, ToggleEdit
)
from agenda.models.view import PageView, RowState
from agenda.utils.validators import is_valid_name, is_valid_phone
from .render import render_form, render_page
from .store import ContactStore


class ContactsController:
    """Holds the add form and per-row edit state for one page.

    Every user action arrives as a command through ``dispatch``, which
    runs it to completion and returns the page rendered from the store.
    """

    def __init__(self, store: ContactStore):
        self.store = store
        self.name = ""
        self.phone = ""
        self.name_valid = False
        self.phone_valid = False
        self.rows: Dict[str, RowState] = {}

    async def dispatch(self, command: Command) -> PageView:
        """Process one command"""
        if isinstance(command, InputName):
            self.handle_input_name(command.value)
        elif isinstance(command, InputPhone):
            self.handle_input_phone(command.value)
        elif isinstance(command, Submit):
            await self.handle_submit()
        elif isinstance(command, DeleteContact):
            await self.handle_delete(command.id)
        elif isinstance(command, ToggleEdit):
            await self.handle_toggle_edit(command.id)
        elif isinstance(command, EditInput):
            self.handle_edit_input(command.id, command.field, command.value)
        else:
            raise TypeError(f"Unknown command: {command!r}")
        return self.view()

    def view(self) -> PageView:
        contacts = self.store.list()
        # Forget rows whose contact went away through another route
        live_ids = {c.id for c in contacts}
        self.rows = {row_id: row for row_id, row in self.rows.items() if row_id in live_ids}
        form = render_form(self.name, self.phone, self.name_valid, self.phone_valid)
        return render_page(form, contacts, self.rows)

    def handle_input_name(self, value: str):
        self.name = value
        self.name_valid = is_valid_name(value)

    def handle_input_phone(self, value: str):
        self.phone = value
        self.phone_valid = is_valid_phone(value)

    async def handle_submit(self):
        if not self.name_valid or not self.phone_valid:
            return
        contact = self.store.add(self.name, self.phone)
        await self.store.save()
        # Full re-render: every row comes back in view mode
        self.rows = {}
        logger.info(f"Added contact {contact.id}")

    async def handle_delete(self, contact_id: str):
        self.store.delete(contact_id)
        await self.store.save()
        self.rows.pop(contact_id, None)

    async def handle_toggle_edit(self, contact_id: str):
        contact = self.store.get(contact_id)
        if contact is None:
            return
        row = self.rows.get(contact_id)

        if row is None or not row.editing:
            logger.debug(f"Editing contact {contact_id}")
            self.rows[contact_id] = RowState(
                id=contact_id,
                editing=True,
                name=contact.name,
                phone=contact.phone,
                name_valid=is_valid_name(contact.name),
                phone_valid=is_valid_phone(contact.phone),
            )
            return

        if not row.name_valid or not row.phone_valid:
            logger.debug(f"Not saving contact {contact_id}, invalid fields")
            return

        self.store.update(contact_id, row.name, row.phone)
        await self.store.save()
        self.rows[contact_id] = RowState(id=contact_id)
        logger.info(f"Saved contact {contact_id}")

    def handle_edit_input(self, contact_id: str, field: str, value: str):
        row = self.rows.get(contact_id)
        if row is None or not row.editing:
            return
        if field == "name":
            row.name = value
            row.name_valid = is_valid_name(value)
        else:
            row.phone = value
            row.phone_valid = is_valid_phone(value)
