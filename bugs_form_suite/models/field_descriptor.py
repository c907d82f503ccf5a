"""
Field descriptors - Semantic identity of each Bugs Form field.
A descriptor says how to look for a field; it does not guarantee a match.
"""

import re
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class FieldDescriptor:
    """Semantic identity for one form field."""

    key: str                         # first_name, last_name, ...
    display_name: str                # name used in logs and reports
    label_pattern: re.Pattern[str]   # accessible label match
    visual_label: str                # exact text of the visible <label>
    placeholder_pattern: re.Pattern[str]

    def __repr__(self) -> str:
        """String representation."""
        return f"FieldDescriptor({self.key} - {self.visual_label!r})"


def _ci(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


FIRST_NAME = FieldDescriptor(
    key='first_name',
    display_name='First Name',
    label_pattern=_ci(r'first\s*name'),
    visual_label='First Name',
    placeholder_pattern=_ci(r'enter.*first'),
)

LAST_NAME = FieldDescriptor(
    key='last_name',
    display_name='Last Name',
    label_pattern=_ci(r'last\s*name'),
    visual_label='Last Name',
    placeholder_pattern=_ci(r'enter.*last'),
)

PHONE = FieldDescriptor(
    key='phone',
    display_name='Phone',
    label_pattern=_ci(r'phone'),
    visual_label='Phone',
    # the site's placeholder misspells "number"
    placeholder_pattern=_ci(r'enter.*(phone|nunber|number)'),
)

COUNTRY = FieldDescriptor(
    key='country',
    display_name='Country',
    label_pattern=_ci(r'country'),
    visual_label='Country',
    placeholder_pattern=_ci(r'country|enter.*country'),
)

EMAIL = FieldDescriptor(
    key='email',
    display_name='Email',
    label_pattern=_ci(r'e-?mail'),
    visual_label='Email address',
    placeholder_pattern=_ci(r'enter.*email'),
)

PASSWORD = FieldDescriptor(
    key='password',
    display_name='Password',
    label_pattern=_ci(r'password'),
    visual_label='Password',
    placeholder_pattern=_ci(r'enter.*password'),
)

TERMS = FieldDescriptor(
    key='terms',
    display_name='Terms and Conditions',
    label_pattern=_ci(r'terms'),
    visual_label='I agree with the terms and conditions',
    placeholder_pattern=_ci(r'terms'),
)

# Accessible name of the submit button
REGISTER_BUTTON_NAME: re.Pattern[str] = _ci(r'register')

# Fill order of the text-like fields
TEXT_FIELDS = (FIRST_NAME, LAST_NAME, PHONE, COUNTRY, EMAIL, PASSWORD)

FIELDS: Dict[str, FieldDescriptor] = {
    descriptor.key: descriptor for descriptor in TEXT_FIELDS + (TERMS,)
}


def get_field(key: str) -> FieldDescriptor:
    """
    Look up a descriptor by key.

    Raises:
        KeyError: If no field has that key
    """
    try:
        return FIELDS[key]
    except KeyError:
        raise KeyError(f"Unknown field: {key}. Expected one of: {', '.join(FIELDS)}") from None
