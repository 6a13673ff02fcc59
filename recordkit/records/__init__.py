"""Record access helpers."""

from .access import get_own_property
from .paths import flatten_object, get_document_properties, get_nested, resolve_path

__all__ = ['get_own_property', 'resolve_path', 'get_nested', 'get_document_properties', 'flatten_object']
