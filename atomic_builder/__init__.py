"""
atomic-builder: expands declarative atomic object catalogs into CSS rule tables.
"""

from atomic_builder.core.rules import AtomicBuilder, CatalogBuilder, CatalogLoader, ConfigLoader
from atomic_builder.core.validators import AtomicBuildError, FormatValidationError, GroupRangeError

__all__ = [
    "AtomicBuilder",
    "CatalogBuilder",
    "CatalogLoader",
    "ConfigLoader",
    "AtomicBuildError",
    "FormatValidationError",
    "GroupRangeError",
]
