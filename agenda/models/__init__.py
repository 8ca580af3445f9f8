from .contact import Contact, ContactCreate
from .commands import (
    Command, CommandRequest,
    InputName, InputPhone, Submit, DeleteContact, ToggleEdit, EditInput
)
from .view import RowState, FormView, RowView, PageView

__all__ = [
    'Contact', 'ContactCreate',
    'Command', 'CommandRequest',
    'InputName', 'InputPhone', 'Submit', 'DeleteContact', 'ToggleEdit', 'EditInput',
    'RowState', 'FormView', 'RowView', 'PageView'
]
