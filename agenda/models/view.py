"""Rendered form and list state"""
from pydantic import BaseModel
from typing import List, Literal

FieldStatus = Literal["default", "valid", "invalid"]


class RowState(BaseModel):
    """Per-row edit state, keyed by contact id"""
    id: str
    editing: bool = False
    name: str = ""
    phone: str = ""
    name_valid: bool = True
    phone_valid: bool = True


class FormView(BaseModel):
    name: str = ""
    phone: str = ""
    name_status: FieldStatus = "default"
    phone_status: FieldStatus = "default"
    name_helper: bool = False
    phone_helper: bool = False
    submit_enabled: bool = False


class RowView(BaseModel):
    id: str
    name: str
    phone: str
    editing: bool = False
    readonly: bool = True
    icon: str
    name_status: FieldStatus = "default"
    phone_status: FieldStatus = "default"
    edit_enabled: bool = True


class PageView(BaseModel):
    form: FormView
    contacts: List[RowView]
