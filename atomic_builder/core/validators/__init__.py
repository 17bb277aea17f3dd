"""
Build errors and custom value formats.

Provides the error taxonomy raised by the rule engine and the named
formats custom-pattern values are checked against.
"""

from .base_validator import (
    AtomicBuildError,
    BaseFormat,
    FormatValidationError,
    GroupRangeError,
)
from .format_validators import (
    FORMAT_REGISTRY,
    AnyFormat,
    BorderFormat,
    ColorFormat,
    LengthFormat,
    NumberFormat,
    RegexFormat,
    resolve_format,
)

__all__ = [
    "AtomicBuildError",
    "GroupRangeError",
    "FormatValidationError",
    "BaseFormat",
    "ColorFormat",
    "LengthFormat",
    "NumberFormat",
    "BorderFormat",
    "AnyFormat",
    "RegexFormat",
    "FORMAT_REGISTRY",
    "resolve_format",
]
