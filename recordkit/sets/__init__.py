"""Set algebra helpers."""

from .algebra import set_difference, set_intersection, set_union

__all__ = ['set_union', 'set_intersection', 'set_difference']
