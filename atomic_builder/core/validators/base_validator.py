"""
Error types and the base interface for custom value formats.

Custom-pattern definitions declare one format per custom value. A format is
any callable taking the value and returning a bool; BaseFormat is the shared
base for the built-in ones.
"""

from abc import ABC, abstractmethod
from typing import Any


class AtomicBuildError(Exception):
    """Raised when well-typed input is semantically invalid for a build."""


class GroupRangeError(AtomicBuildError, ValueError):
    """Raised when a custom-pattern config group exceeds the label capacity."""


class FormatValidationError(AtomicBuildError):
    """Raised when a custom value does not satisfy its declared format."""

    def __init__(self, obj_id: str, label: str, suffix: str, position: int, value: Any):
        self.obj_id = obj_id
        self.label = label
        self.suffix = suffix
        self.position = position
        self.value = value
        super().__init__(
            f"[{obj_id}] group '{label}', suffix '{suffix}': "
            f"value {value!r} at position {position} does not match its format"
        )


class BaseFormat(ABC):
    """
    Abstract base class for custom value formats.

    Subclasses implement matches(); calling the instance delegates to it so
    formats can be passed anywhere a plain predicate is expected.
    """

    @abstractmethod
    def matches(self, value: Any) -> bool:
        """
        Check a single custom value.

        Args:
            value: The value supplied by a config group

        Returns:
            True if the value is acceptable
        """
        pass

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the format identifier."""
        pass

    def __call__(self, value: Any) -> bool:
        return self.matches(value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
