"""
Form data model - Values typed into the registration form.
Built per step from the default record plus a partial override.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class FormData(BaseModel):
    """Values for one registration attempt."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    first_name: str = 'Abel'
    last_name: str = 'Diaz'
    phone: str = '1234567890'
    country: str = 'Argentina'
    email: str = 'abel.diaz@example.com'
    password: str = 'abc123'
    # The T&C checkbox is disabled on the site, so it stays unchecked by default
    accept_terms: bool = False

    @classmethod
    def with_overrides(cls, **overrides: Any) -> 'FormData':
        """
        Merge a partial override over the default record.

        Args:
            **overrides: Field values to replace (e.g. last_name='')

        Returns:
            New FormData instance

        Raises:
            pydantic.ValidationError: On unknown keys or wrong types
        """
        return cls(**{**cls().model_dump(), **overrides})

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump()

    def value_for(self, key: str) -> Any:
        """Get the value for a field key."""
        return getattr(self, key)
