"""Input validators"""
import re

PHONE_PREFIXES = ('414', '424', '416', '426', '422', '412', '212')

# Capitalized word, a space, capitalized word of four or more letters,
# at most one trailing space
NAME_PATTERN = re.compile(r'^[A-Z][a-z]*[ ][A-Z][a-z]{3,}[ ]?$')
PHONE_PATTERN = re.compile(r'^0(' + '|'.join(PHONE_PREFIXES) + r')[0-9]{7}$')


def is_valid_name(name: str) -> bool:
    """Check a full name against the name pattern"""
    return bool(NAME_PATTERN.fullmatch(name or ''))


def is_valid_phone(phone: str) -> bool:
    """Check a phone number against the phone pattern"""
    return bool(PHONE_PATTERN.fullmatch(phone or ''))


def validate_name(name: str) -> str:
    """Validate a full name"""
    if not is_valid_name(name):
        raise ValueError('Name must be a capitalized first name and a capitalized last name of at least 4 letters')
    return name


def validate_phone(phone: str) -> str:
    """Validate a phone number"""
    if not is_valid_phone(phone):
        raise ValueError(f'Phone number must be 0 followed by one of {", ".join(PHONE_PREFIXES)} and 7 digits')
    return phone
