"""Contacts business logic"""
from .store import ContactStore
from .controller import ContactsController
from .render import field_status, render_form, render_row, render_page

__all__ = [
    'ContactStore', 'ContactsController',
    'field_status', 'render_form', 'render_row', 'render_page'
]
