"""Data-shaping helpers: unit formatting, nested record access and set algebra."""

from .config import Settings, load_settings
from .formatting import BYTE_UNITS, format_bytes, format_nanoseconds, now_nanoseconds
from .formatting.formatter import UnitFormatter
from .records import flatten_object, get_document_properties, get_nested, get_own_property, resolve_path
from .sets import set_difference, set_intersection, set_union

__version__ = '0.1.0'

__all__ = [
    'Settings',
    'load_settings',
    'BYTE_UNITS',
    'format_bytes',
    'format_nanoseconds',
    'now_nanoseconds',
    'UnitFormatter',
    'get_own_property',
    'resolve_path',
    'get_nested',
    'get_document_properties',
    'flatten_object',
    'set_union',
    'set_intersection',
    'set_difference',
]
