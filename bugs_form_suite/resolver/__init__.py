"""Field resolution for the Bugs Form suite."""

from .control import Control, ResolutionStrategy
from .field_resolver import FieldResolver

__all__ = ['Control', 'ResolutionStrategy', 'FieldResolver']
