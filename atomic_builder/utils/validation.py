"""
Shape checks shared by the configuration model and the rule engine.

Every check raises TypeError for a value of the wrong type, the contract
callers of the engine rely on. Semantic problems (missing keys, wrong
arity) raise AtomicBuildError instead.
"""

from collections.abc import Mapping
from typing import Any

from atomic_builder.core.validators import AtomicBuildError


def is_sequence(value: Any) -> bool:
    """Return True for ordered sequences accepted by the engine (list or tuple)."""
    return isinstance(value, (list, tuple))


def require_sequence(value: Any, field_name: str) -> list | tuple:
    """
    Ensure `value` is a list or tuple.

    Raises:
        TypeError: If it is anything else (strings included)

    Examples:
        >>> require_sequence(["a"], "rules")
        ['a']
        >>> require_sequence("a", "rules")  # doctest: +SKIP
        TypeError: rules must be a list, got str
    """
    if not is_sequence(value):
        raise TypeError(f"{field_name} must be a list, got {type(value).__name__}")
    return value


def require_string(value: Any, field_name: str) -> str:
    """
    Ensure `value` is a string.

    Raises:
        TypeError: If it is not
    """
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
    return value


def require_mapping(value: Any, field_name: str) -> Mapping:
    """
    Ensure `value` is a key-value mapping.

    Raises:
        TypeError: If it is not
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{field_name} must be a mapping, got {type(value).__name__}")
    return value


def require_callables(value: Any, field_name: str) -> list | tuple:
    """
    Ensure `value` is a list or tuple whose elements are all callable.

    Raises:
        TypeError: If the container or any element has the wrong type
    """
    require_sequence(value, field_name)
    for i, item in enumerate(value):
        if not callable(item):
            raise TypeError(f"{field_name}[{i}] must be callable, got {type(item).__name__}")
    return value


def split_pattern_rule(rule: Any, field_name: str = "rule") -> tuple[str, list | tuple]:
    """
    Extract `(suffix, values)` from a pattern rule.

    Accepts a mapping or any object exposing `suffix` and `values`
    attributes (e.g. a PatternRule model).

    Raises:
        AtomicBuildError: If `suffix` or `values` is absent
        TypeError: If `suffix` is not a string or `values` is not a list
    """
    if isinstance(rule, Mapping):
        if "suffix" not in rule or "values" not in rule:
            raise AtomicBuildError(f"{field_name} must define both 'suffix' and 'values'")
        suffix, values = rule["suffix"], rule["values"]
    elif hasattr(rule, "suffix") and hasattr(rule, "values"):
        suffix, values = rule.suffix, rule.values
    else:
        raise AtomicBuildError(f"{field_name} must define both 'suffix' and 'values'")

    require_string(suffix, f"{field_name}.suffix")
    require_sequence(values, f"{field_name}.values")
    return suffix, values
