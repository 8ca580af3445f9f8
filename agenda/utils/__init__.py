from .validators import (
    NAME_PATTERN, PHONE_PATTERN, PHONE_PREFIXES,
    is_valid_name, is_valid_phone, validate_name, validate_phone
)

__all__ = [
    'NAME_PATTERN', 'PHONE_PATTERN', 'PHONE_PREFIXES',
    'is_valid_name', 'is_valid_phone', 'validate_name', 'validate_phone'
]
