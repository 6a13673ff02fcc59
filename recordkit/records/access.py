"""Own-property lookup on mappings and plain objects."""

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional


def _instance_dict(record: Any) -> Optional[Dict[str, Any]]:
    """Instance ``__dict__`` of ``record`` or None when it cannot be read."""
    try:
        return vars(record)
    except TypeError:
        return None


def _declared_slots(cls: type) -> Iterator[str]:
    slots = cls.__dict__.get('__slots__', ())
    if isinstance(slots, str):
        slots = (slots,)
    yield from slots


def _raw_instance_dict(record: Any) -> Optional[Dict[str, Any]]:
    """Instance ``__dict__`` read past ``vars`` and any ``__getattr__`` hooks."""
    try:
        own = object.__getattribute__(record, '__dict__')
    except (AttributeError, TypeError):
        return None
    return own if isinstance(own, dict) else None


def _type_lookup(record: Any, key: str, default: Any) -> Any:
    """
    Look ``key`` up when ``vars`` cannot read the instance ``__dict__``.
    
    The raw ``__dict__`` is tried first, so an instance value shadowing a
    class attribute is still found. Otherwise a name defined on the type
    is own only when it is a slot, and is then read through its
    descriptor. A name the type does not define can only live on the
    instance.
    """
    raw = _raw_instance_dict(record)
    if raw is not None and key in raw:
        return raw[key]
    
    for cls in type(record).__mro__:
        if key not in cls.__dict__:
            continue
        if key not in _declared_slots(cls):
            return default
        try:
            return cls.__dict__[key].__get__(record, cls)
        except AttributeError:
            # declared but never assigned
            return default
    return getattr(record, key, default)


def _slot_value(record: Any, key: str, default: Any) -> Any:
    for cls in type(record).__mro__:
        if key in _declared_slots(cls) and key in cls.__dict__:
            try:
                return cls.__dict__[key].__get__(record, cls)
            except AttributeError:
                return default
    return default


def get_own_property(record: Any, key: str, default: Any = None) -> Any:
    """
    Return ``record[key]`` only if ``key`` belongs to the record itself.
    
    Mappings are checked for key presence without indexing, so hooks such
    as ``defaultdict.__missing__`` never fire. For other objects only
    instance attributes count: the instance ``__dict__`` and slots. When
    the ``__dict__`` cannot be read the type is inspected instead, which
    gives the same answer for ordinary objects. Class attributes, methods
    and properties are never returned.
    
    Parameters
    ----------
    record : Any
        Mapping or object to inspect
    key : str
        Property name
    default : Any
        Returned when the property is absent
        
    Returns
    -------
    Any
        The property value or ``default``
    """
    if isinstance(record, Mapping):
        return record[key] if key in record else default
    
    own = _instance_dict(record)
    if own is None:
        return _type_lookup(record, key, default)
    
    if key in own:
        return own[key]
    return _slot_value(record, key, default)
