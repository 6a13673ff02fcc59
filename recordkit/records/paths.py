"""Dotted-path traversal and flattening of nested records."""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable

logger = logging.getLogger(__name__)

# Distinguishes "no value" from a stored None
_MISSING = object()


def _walk(record: Any, path: str) -> Any:
    """
    Follow ``path`` through nested mappings.
    
    Only a leaf at the end of the path is a result. Every other outcome
    (missing key, non-mapping on the way, a mapping at the end) is
    ``_MISSING``.
    """
    current = record
    for segment in path.split('.'):
        if not isinstance(current, Mapping) or segment not in current:
            return _MISSING
        current = current[segment]
    
    if isinstance(current, Mapping):
        return _MISSING
    return current


def resolve_path(record: Any, path: str, default: Any = None) -> Any:
    """
    Resolve a dotted path to a leaf value.
    
    Parameters
    ----------
    record : Any
        Nested mapping to traverse
    path : str
        Keys separated by ``.``, e.g. ``"author.address.city"``
    default : Any
        Returned when the path does not end on a leaf
        
    Returns
    -------
    Any
        The leaf value or ``default``
    
    Notes
    -----
    Intermediate values must be mappings: a None, callable, list or scalar
    on the way stops the walk. Paths ending on a nested mapping resolve to
    ``default`` as well, so callers only ever receive leaves.
    """
    value = _walk(record, path)
    return default if value is _MISSING else value


async def get_nested(record: Any, path: str, default: Any = None) -> Any:
    """Awaitable form of :func:`resolve_path`. Never suspends."""
    return resolve_path(record, path, default)


def get_document_properties(record: Any, paths: Iterable[str]) -> Dict[str, Any]:
    """
    Resolve several paths at once.
    
    Paths that do not resolve to a leaf are left out of the result; a
    stored None leaf is kept.
    """
    properties = {}
    unresolved = 0
    
    for path in paths:
        value = _walk(record, path)
        if value is _MISSING:
            unresolved += 1
            continue
        properties[path] = value
    
    if unresolved:
        logger.debug(f"{unresolved} path(s) did not resolve to a leaf")
    
    return properties


def flatten_object(record: Mapping, prefix: str = '') -> Dict[str, Any]:
    """
    Flatten nested mappings into a single ``{dotted.path: leaf}`` dict.
    
    Parameters
    ----------
    record : Mapping
        Source mapping, left untouched
    prefix : str
        Prepended to every emitted path
        
    Returns
    -------
    Dict[str, Any]
        Leaves in depth-first order. None, callables and sequences are
        leaves; empty nested mappings emit nothing.
    """
    result = {}
    
    for key, value in record.items():
        path = f'{prefix}{key}'
        if isinstance(value, Mapping):
            result.update(flatten_object(value, f'{path}.'))
        else:
            result[path] = value
    
    return result
