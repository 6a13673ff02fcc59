"""Settings for the formatting helpers, optionally loaded from YAML."""

import logging
import yaml
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from recordkit.formatting.units import BYTE_UNITS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Formatting options shared by a UnitFormatter."""
    byte_decimals: int = 2
    byte_units: Tuple[str, ...] = BYTE_UNITS
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """
        Build settings from a plain mapping, validating every key.
        
        Raises
        ------
        ValueError
            On unknown keys or values of the wrong shape
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(map(str, unknown))}")
        
        values = {}
        
        if 'byte_decimals' in data:
            decimals = data['byte_decimals']
            if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
                raise ValueError(f"byte_decimals must be a non-negative integer, got {decimals!r}")
            values['byte_decimals'] = decimals
        
        if 'byte_units' in data:
            units = data['byte_units']
            if (not isinstance(units, (list, tuple)) or not units
                    or not all(isinstance(unit, str) for unit in units)):
                raise ValueError(f"byte_units must be a non-empty list of strings, got {units!r}")
            values['byte_units'] = tuple(units)
        
        return cls(**values)


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from a YAML file.
    
    Parameters
    ----------
    path : Optional[Path]
        YAML file; a missing path or an empty file gives the defaults
        
    Returns
    -------
    Settings
        Validated settings
    """
    if path is None or not Path(path).exists():
        logger.debug(f"No settings file at {path}, using defaults")
        return Settings()
    
    with open(path, 'r') as f:
        data = yaml.safe_load(f)
    
    if data is None:
        return Settings()
    
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping at the top level")
    
    settings = Settings.from_dict(data)
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings
