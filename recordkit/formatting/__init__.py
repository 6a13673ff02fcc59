"""Byte and duration formatting."""

from .units import BYTE_UNITS, format_bytes, format_nanoseconds, now_nanoseconds

__all__ = ['BYTE_UNITS', 'format_bytes', 'format_nanoseconds', 'now_nanoseconds']
