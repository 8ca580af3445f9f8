"""Contact form and list rendering"""
from typing import Dict, List

from agenda.models.contact import Contact
from agenda.models.view import FormView, PageView, RowState, RowView

DEFAULT_ICON = "create-outline"
EDITING_ICON = "pencil-outline"


def field_status(value: str, is_valid: bool) -> str:
    """Visual state of a field: untouched, valid or invalid"""
    if not value:
        return "default"
    return "valid" if is_valid else "invalid"


def render_form(name: str, phone: str, name_valid: bool, phone_valid: bool) -> FormView:
    name_status = field_status(name, name_valid)
    phone_status = field_status(phone, phone_valid)
    return FormView(
        name=name,
        phone=phone,
        name_status=name_status,
        phone_status=phone_status,
        name_helper=name_status == "invalid",
        phone_helper=phone_status == "invalid",
        submit_enabled=name_valid and phone_valid,
    )


def render_row(contact: Contact, state: RowState) -> RowView:
    """Clone the row template for one contact"""
    if not state.editing:
        return RowView(id=contact.id, name=contact.name, phone=contact.phone, icon=DEFAULT_ICON)

    # Edit fields have no helper text, so an empty draft is just invalid
    return RowView(
        id=contact.id,
        name=state.name,
        phone=state.phone,
        editing=True,
        readonly=False,
        icon=EDITING_ICON,
        name_status="valid" if state.name_valid else "invalid",
        phone_status="valid" if state.phone_valid else "invalid",
        edit_enabled=state.name_valid and state.phone_valid,
    )


def render_page(form: FormView, contacts: List[Contact], rows: Dict[str, RowState]) -> PageView:
    return PageView(
        form=form,
        contacts=[render_row(c, rows.get(c.id) or RowState(id=c.id)) for c in contacts],
    )
