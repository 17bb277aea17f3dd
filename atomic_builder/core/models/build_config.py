"""
Build configuration: which members of each atomic object family are wanted.

The raw configuration is a mapping of atomic object id to a gate, plus the
reserved `config` key holding global settings:

```yaml
config:
  namespace: "#atomic"
  start: left
  end: right
font-weight:          # pattern: per-suffix switches, optional custom members
  n: true
  b: true
  custom:
    - {suffix: "600", values: ["600"]}
clearfix: true        # rule: on/off
border:               # custom-pattern: one group per generated variant
  - {x: ["1px solid #000", "1px solid #000"]}
```
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from atomic_builder.utils.validation import is_sequence, require_mapping

SETTINGS_KEY = "config"


class BuildSettings(BaseModel):
    """
    Global settings stored under the reserved `config` key.

    Attributes:
        namespace: Selector wrapping the whole build, e.g. "#atomic"
        start: Direction substituted for `__START__` on output
        end: Direction substituted for `__END__` on output
        defaults: Free-form default values for catalog authors
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    namespace: str | None = None
    start: str = "left"
    end: str = "right"
    defaults: dict[str, str] = Field(default_factory=dict)


class SuffixGate(BaseModel):
    """Per-suffix switches for a pattern, plus optional custom members."""

    suffixes: dict[str, bool] = Field(default_factory=dict)
    custom: Any = None


class BuildConfig(BaseModel):
    """
    Parsed configuration.

    Gates are `bool` (rule objects), SuffixGate (pattern objects) or a list
    of config groups (custom-pattern objects).
    """

    settings: BuildSettings = Field(default_factory=BuildSettings)
    gates: dict[str, bool | SuffixGate | list[Any]] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "BuildConfig":
        """
        Validate a raw configuration mapping.

        Raises:
            TypeError: If the settings block or a gate has the wrong shape
        """
        require_mapping(config, "config")

        settings = require_mapping(config.get(SETTINGS_KEY) or {}, "config.config")
        gates: dict[str, bool | SuffixGate | list[Any]] = {}

        for obj_id, gate in config.items():
            if obj_id == SETTINGS_KEY:
                continue
            gates[obj_id] = _parse_gate(obj_id, gate)

        return cls(settings=BuildSettings.model_validate(dict(settings)), gates=gates)

    @property
    def namespace(self) -> str | None:
        return self.settings.namespace

    def gate(self, obj_id: str) -> bool | SuffixGate | list[Any]:
        """
        Return the gate configured for `obj_id`.

        Raises:
            TypeError: If the configuration has no entry for `obj_id`
        """
        if obj_id not in self.gates:
            raise TypeError(f"Configuration has no entry for '{obj_id}'")
        return self.gates[obj_id]

    def is_enabled(self, obj_id: str) -> bool:
        """Whole-object switch used by rule objects."""
        gate = self.gate(obj_id)
        if not isinstance(gate, bool):
            raise TypeError(f"Configuration for '{obj_id}' must be a boolean")
        return gate

    def is_suffix_enabled(self, obj_id: str, suffix: str) -> bool:
        """Per-suffix switch used by pattern objects."""
        gate = self.gate(obj_id)
        if isinstance(gate, SuffixGate):
            return gate.suffixes.get(suffix, False)
        return False

    def custom_rules(self, obj_id: str) -> Any:
        """
        Raw `custom` value configured for a pattern, or None.

        Not type-checked here: whether custom members are permitted at all
        is decided first, by the engine.
        """
        gate = self.gate(obj_id)
        if isinstance(gate, SuffixGate):
            return gate.custom
        return None

    def config_group(self, obj_id: str) -> list[Any]:
        """
        Config groups configured for a custom-pattern.

        Raises:
            TypeError: If the entry is not a list of groups
        """
        gate = self.gate(obj_id)
        if not isinstance(gate, list):
            raise TypeError(f"Configuration for '{obj_id}' must be a list of groups")
        return gate


def _parse_gate(obj_id: str, gate: Any) -> bool | SuffixGate | list[Any]:
    if isinstance(gate, bool):
        return gate

    if isinstance(gate, Mapping):
        return SuffixGate(
            suffixes={suffix: bool(on) for suffix, on in gate.items() if suffix != "custom"},
            custom=gate.get("custom"),
        )

    if is_sequence(gate):
        return list(gate)

    raise TypeError(
        f"config.{obj_id} must be a boolean, a mapping of suffixes or a list of groups, "
        f"got {type(gate).__name__}"
    )
