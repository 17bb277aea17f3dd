"""
Core data models for the atomic CSS builder.

All models use Pydantic for runtime validation and type safety.
"""

from .atomic_object import (
    ATOMIC_OBJECT_KINDS,
    AtomicObject,
    CustomPatternObject,
    PatternObject,
    PatternRule,
    RuleObject,
    parse_atomic_object,
)
from .build_config import BuildConfig, BuildSettings, SuffixGate

__all__ = [
    "ATOMIC_OBJECT_KINDS",
    "AtomicObject",
    "RuleObject",
    "PatternObject",
    "CustomPatternObject",
    "PatternRule",
    "parse_atomic_object",
    "BuildConfig",
    "BuildSettings",
    "SuffixGate",
]
