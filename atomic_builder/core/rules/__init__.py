"""
Rule engine and catalog/configuration management.
"""

from .labels import LABEL_SCHEMES, MAX_GROUPS
from .rule_config import CatalogBuilder, CatalogLoader, ConfigLoader
from .rule_engine import AtomicBuilder

__all__ = [
    "AtomicBuilder",
    "CatalogLoader",
    "ConfigLoader",
    "CatalogBuilder",
    "LABEL_SCHEMES",
    "MAX_GROUPS",
]
