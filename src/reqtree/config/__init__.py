"""Configuration for reqtree loading.

Main components:
- LoadSettings: descriptor/item naming conventions with env overrides
- Default values for the doorstop on-disk layout
- Validation message helpers for pydantic errors
"""

from reqtree.config.settings import LoadSettings
from reqtree.config.validator import flatten_pydantic_errors

__all__ = [
    "LoadSettings",
    "flatten_pydantic_errors",
]
