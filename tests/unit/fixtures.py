"""
Test fixtures for unit tests.

Provides:
- Nested records with None, callable and list leaves
- Objects with and without an instance __dict__
- The sets used by the set algebra tests
"""

from collections import OrderedDict
from typing import Any, Dict, Set, Tuple


# ============================================================================
# RECORD FIXTURES
# ============================================================================

def noop():
    return None


class RecordFixtures:
    """Factory for nested record fixtures."""
    
    @staticmethod
    def create_nested_record() -> Dict[str, Any]:
        """Record with a three-level chain plus None and callable leaves."""
        return {
            'foo': 'bar',
            'nested': {
                'nested2': {
                    'nested3': {
                        'bar': 'baz'
                    }
                },
                'null': None,
                'noop': noop
            }
        }
    
    @staticmethod
    def create_document() -> Dict[str, Any]:
        """Document-like record with mixed leaf types."""
        return OrderedDict([
            ('title', 'The Prophet'),
            ('year', 1923),
            ('in_print', True),
            ('tags', ['poetry', 'essays']),
            ('author', OrderedDict([
                ('name', 'Kahlil Gibran'),
                ('address', OrderedDict([
                    ('city', 'New York'),
                    ('zip', None),
                ])),
            ])),
            ('meta', {}),
            ('rating', 4.5),
        ])


class PlainObject:
    """Object with an instance __dict__ and a class attribute."""
    
    kind = 'plain'
    
    def __init__(self, foo: str = 'bar'):
        self.foo = foo
    
    @property
    def shout(self) -> str:
        return self.foo.upper()
    
    def method(self):
        return self.foo


class SlottedBase:
    __slots__ = ('foo',)
    
    kind = 'slotted'


class SlottedObject(SlottedBase):
    """Object without an instance __dict__; slots come from two classes."""
    
    __slots__ = ('extra', 'unset')
    
    def __init__(self, foo: str = 'bar', extra: int = 1):
        self.foo = foo
        self.extra = extra


class HybridObject:
    """Slots plus an instance __dict__."""
    
    __slots__ = ('foo', '__dict__')
    
    def __init__(self):
        self.foo = 'slot'
        self.bar = 'dict'


class ShadowingObject:
    """Instance attribute that hides a class attribute of the same name."""
    
    kind = 'class'
    
    def __init__(self):
        self.kind = 'instance'


# ============================================================================
# SET FIXTURES
# ============================================================================

class SetFixtures:
    """Factory for set algebra fixtures."""
    
    @staticmethod
    def create_three_sets() -> Tuple[Set[int], Set[int], Set[int]]:
        return {1, 2, 3}, {2, 3, 4}, {2, 3, 5}


# Export all fixture classes
__all__ = [
    'noop',
    'RecordFixtures',
    'PlainObject',
    'SlottedBase',
    'SlottedObject',
    'HybridObject',
    'ShadowingObject',
    'SetFixtures',
]
