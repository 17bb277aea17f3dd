"""
Label schemes for custom-pattern groups.

A label scheme maps a 0-based group index to the short label appended to
generated selectors (`.Bd-x--a`). Every scheme must be injective over
`range(MAX_GROUPS)` and produce characters that are safe in a class name.
"""

import re
import string
from collections.abc import Callable

MAX_GROUPS = len(string.ascii_lowercase)

LabelScheme = Callable[[int], str]

SAFE_LABEL = re.compile(r"^[A-Za-z0-9_-]+$")


def alphabet_label(index: int) -> str:
    """0 -> 'a', 1 -> 'b', ... 25 -> 'z'."""
    return string.ascii_lowercase[index]


def numeric_label(index: int) -> str:
    """0 -> '1', 1 -> '2', ... 25 -> '26'."""
    return str(index + 1)


LABEL_SCHEMES: dict[str, LabelScheme] = {
    "alphabet": alphabet_label,
    "numeric": numeric_label,
}


def check_label_scheme(name: str, scheme: LabelScheme) -> None:
    """
    Verify a scheme is usable for every group index.

    Raises:
        ValueError: If labels collide or contain unsafe characters
    """
    labels = [scheme(i) for i in range(MAX_GROUPS)]
    for label in labels:
        if not isinstance(label, str) or not SAFE_LABEL.match(label):
            raise ValueError(f"Label scheme '{name}' produced an unsafe label: {label!r}")
    if len(set(labels)) != len(labels):
        raise ValueError(f"Label scheme '{name}' is not injective over {MAX_GROUPS} groups")
