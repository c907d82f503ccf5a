"""Data models for the Bugs Form suite."""

from .field_descriptor import FieldDescriptor, FIELDS, get_field
from .form_data import FormData
from .report import DefectReport, Finding

__all__ = ['FieldDescriptor', 'FIELDS', 'get_field', 'FormData', 'DefectReport', 'Finding']
