"""Form and list commands, one per user action"""
from pydantic import BaseModel, Field
from typing import Annotated, Literal, Union


class InputName(BaseModel):
    kind: Literal["input_name"] = "input_name"
    value: str = ""


class InputPhone(BaseModel):
    kind: Literal["input_phone"] = "input_phone"
    value: str = ""


class Submit(BaseModel):
    kind: Literal["submit"] = "submit"


class DeleteContact(BaseModel):
    kind: Literal["delete"] = "delete"
    id: str


class ToggleEdit(BaseModel):
    kind: Literal["toggle_edit"] = "toggle_edit"
    id: str


class EditInput(BaseModel):
    kind: Literal["edit_input"] = "edit_input"
    id: str
    field: Literal["name", "phone"]
    value: str = ""


Command = Annotated[
    Union[InputName, InputPhone, Submit, DeleteContact, ToggleEdit, EditInput],
    Field(discriminator="kind"),
]


class CommandRequest(BaseModel):
    command: Command
