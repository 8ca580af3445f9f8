"""Contact models"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
import uuid

from agenda.utils.validators import validate_name, validate_phone


class Contact(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    phone: str


class ContactCreate(BaseModel):
    name: str
    phone: str
    
    @field_validator('name')
    @classmethod
    def check_name(cls, v):
        return validate_name(v)

    @field_validator('phone')
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)
