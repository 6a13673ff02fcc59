"""Formatter bound to a Settings instance."""

import logging
from typing import Optional

from recordkit.config import Settings
from recordkit.formatting.units import format_bytes, format_nanoseconds, now_nanoseconds

logger = logging.getLogger(__name__)


class UnitFormatter:
    """Format sizes and durations with configured options."""
    
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
    
    def bytes(self, count: int) -> str:
        return format_bytes(count, decimals=self.settings.byte_decimals,
                            units=self.settings.byte_units)
    
    def nanoseconds(self, count: int) -> str:
        return format_nanoseconds(count)
    
    def elapsed(self, start_ns: int, end_ns: Optional[int] = None) -> str:
        """
        Format the time between two clock readings.
        
        Parameters
        ----------
        start_ns : int
            Reading taken with ``now_nanoseconds()``
        end_ns : Optional[int]
            Later reading; defaults to the current clock
            
        Returns
        -------
        str
            Formatted duration, never negative
        """
        if end_ns is None:
            end_ns = now_nanoseconds()
        
        delta = end_ns - start_ns
        if delta < 0:
            logger.warning(f"End reading {end_ns} precedes start {start_ns}, reporting 0ns")
            delta = 0
        
        return format_nanoseconds(delta)
