"""Union, intersection and difference over sets.

Two cases hand back an input object instead of a copy:
``set_union(None, b)`` returns ``b`` and ``set_intersection(s)`` returns
``s``. Callers folding many sets into an accumulator rely on this; do not
mutate the result in those cases unless the input may change too.
"""

from collections.abc import Set as AbstractSet
from typing import Optional, Set


def set_union(a: Optional[AbstractSet], b: AbstractSet) -> AbstractSet:
    """Elements of ``a`` or ``b``; ``b`` itself when ``a`` is None."""
    if a is None:
        return b
    return set(a).union(b)


def set_intersection(*sets: AbstractSet) -> AbstractSet:
    """
    Elements present in every input set.
    
    Parameters
    ----------
    *sets : AbstractSet
        Zero or more sets
    
    Returns
    -------
    AbstractSet
        A new empty set for no input, the input itself for one set and a
        new set otherwise
    """
    if not sets:
        return set()
    if len(sets) == 1:
        return sets[0]
    
    # Cost follows the smallest input
    ordered = sorted(sets, key=len)
    smallest, others = ordered[0], ordered[1:]
    
    return {item for item in smallest if all(item in other for other in others)}


def set_difference(a: AbstractSet, b: AbstractSet) -> Set:
    """Elements of ``a`` that are not in ``b``, always as a new set."""
    return {item for item in a if item not in b}
