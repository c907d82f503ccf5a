"""Form flows built on top of the field resolver."""

from .form_filler import FormFiller
from .validity import ValidityChecker

__all__ = ['FormFiller', 'ValidityChecker']
