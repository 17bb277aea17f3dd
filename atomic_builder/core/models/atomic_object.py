"""
Atomic object definitions: declarative templates for families of CSS rules.
"""

from collections.abc import Callable
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from atomic_builder.core.validators import AtomicBuildError
from atomic_builder.utils.validation import (
    require_callables,
    require_mapping,
    require_sequence,
    require_string,
    split_pattern_rule,
)

ATOMIC_OBJECT_KINDS = ("rule", "pattern", "custom-pattern")


class _AtomicModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
    )


class PatternRule(_AtomicModel):
    """
    One member of a pattern family.

    Attributes:
        suffix: Appended to the family prefix to form the selector
        values: For `pattern` objects, declaration values zipped against the
                family's properties. For `custom-pattern` objects, the
                property names that receive the custom values.
    """

    suffix: str
    values: list[str]


class RuleObject(_AtomicModel):
    """
    A literal rule block, switched on or off as a whole.

    Attributes:
        id: Configuration key
        name: Human-readable name
        rule: Mapping of selector to declaration block
    """

    kind: Literal["rule"] = "rule"
    id: str
    name: str | None = None
    rule: dict[str, dict[str, str]]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "kind": "rule",
                "id": "clearfix",
                "name": "Clearfix",
                "rule": {".cf:after": {"content": '""', "display": "table", "clear": "both"}},
            }
        }
    )


class PatternObject(_AtomicModel):
    """
    A family of rules sharing a prefix and a list of CSS properties.

    Attributes:
        id: Configuration key
        name: Human-readable name
        prefix: Selector prefix, e.g. ".Fw-"
        properties: CSS properties every rule sets, in order
        rules: Enumerated members of the family
        allow_custom: Whether the configuration may add custom members
    """

    kind: Literal["pattern"] = "pattern"
    id: str
    name: str | None = None
    prefix: str
    properties: list[str]
    rules: list[PatternRule] = Field(default_factory=list)
    allow_custom: bool = Field(False, alias="allowCustom")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "kind": "pattern",
                "id": "font-weight",
                "name": "Font weight",
                "prefix": ".Fw-",
                "properties": ["font-weight"],
                "rules": [
                    {"suffix": "n", "values": ["normal"]},
                    {"suffix": "b", "values": ["bold"]},
                ],
                "allowCustom": True,
            }
        }
    )


class CustomPatternObject(_AtomicModel):
    """
    A family whose values come entirely from configuration groups.

    Attributes:
        id: Configuration key
        name: Human-readable name
        prefix: Selector prefix, e.g. ".Bd-"
        suffix_type: Label scheme used to tell groups apart ("alphabet")
        format: One predicate per custom value of a group, in rule order
        rules: Members; each rule's `values` are the CSS properties it sets
    """

    kind: Literal["custom-pattern"] = "custom-pattern"
    id: str
    name: str | None = None
    prefix: str
    suffix_type: str = Field(alias="suffixType")
    format: list[Callable[[Any], bool]] = Field(default_factory=list)
    rules: list[PatternRule] = Field(default_factory=list)


AtomicObject = Annotated[
    Union[RuleObject, PatternObject, CustomPatternObject],
    Field(discriminator="kind"),
]

_atomic_object_adapter = TypeAdapter(AtomicObject)


def parse_atomic_object(entry: Any, index: int = 0) -> RuleObject | PatternObject | CustomPatternObject:
    """
    Turn a raw catalog entry into its typed definition.

    Shape errors are raised as TypeError, including those only pydantic
    catches, so that callers see the same failures whether a definition
    arrives as a dict or is added through the engine's methods directly.

    Args:
        entry: A mapping or an already parsed definition
        index: Position in the catalog (for error messages)

    Returns:
        The parsed definition

    Raises:
        TypeError: If a required field has the wrong type
        AtomicBuildError: If `kind` is not recognized or a rule is incomplete
    """
    if isinstance(entry, (RuleObject, PatternObject, CustomPatternObject)):
        return entry

    where = f"atomic_objs[{index}]"
    require_mapping(entry, where)
    obj_id = require_string(entry.get("id"), f"{where}.id")
    kind = require_string(entry.get("kind"), f"{where}.kind")
    where = f"atomic object '{obj_id}'"

    if kind == "rule":
        rule = require_mapping(entry.get("rule"), f"{where}.rule")
        for selector, block in rule.items():
            require_mapping(block, f"{where}.rule['{selector}']")
    elif kind == "pattern":
        require_sequence(entry.get("properties"), f"{where}.properties")
        require_string(entry.get("prefix"), f"{where}.prefix")
        for i, rule in enumerate(require_sequence(entry.get("rules", []), f"{where}.rules")):
            split_pattern_rule(rule, f"{where}.rules[{i}]")
    elif kind == "custom-pattern":
        require_string(entry.get("prefix"), f"{where}.prefix")
        require_string(entry.get("suffixType", entry.get("suffix_type")), f"{where}.suffixType")
        require_callables(entry.get("format", []), f"{where}.format")
        for i, rule in enumerate(require_sequence(entry.get("rules", []), f"{where}.rules")):
            split_pattern_rule(rule, f"{where}.rules[{i}]")
    else:
        raise AtomicBuildError(
            f"Unknown kind '{kind}' for {where}. Must be one of {', '.join(ATOMIC_OBJECT_KINDS)}"
        )

    try:
        return _atomic_object_adapter.validate_python(dict(entry))
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"][1:])
        raise TypeError(f"{where}.{field}: {error['msg']}") from e

