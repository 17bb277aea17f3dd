"""
Rule engine expanding atomic object definitions into a CSS build.

The engine walks the catalog of atomic objects in order, consults the
configuration to decide which members are wanted, and writes
selector -> declaration block entries into its build table.
"""

from collections.abc import Mapping
from typing import Any, assert_never

from atomic_builder.core.models import (
    BuildConfig,
    BuildSettings,
    CustomPatternObject,
    PatternObject,
    RuleObject,
    parse_atomic_object,
)
from atomic_builder.core.validators import (
    AtomicBuildError,
    FormatValidationError,
    GroupRangeError,
)
from atomic_builder.observability.logger import get_logger
from atomic_builder.utils.validation import (
    is_sequence,
    require_callables,
    require_mapping,
    require_sequence,
    require_string,
    split_pattern_rule,
)

from .labels import LABEL_SCHEMES, MAX_GROUPS, LabelScheme, check_label_scheme

logger = get_logger(__name__)

Build = dict[str, dict[str, str]]


class AtomicBuilder:
    """
    Expands atomic objects into a flat selector -> declarations table.

    The catalog and configuration are loaded and the build is run on
    construction, so `get_build()` is usable as soon as the instance exists.
    Any error raised while running propagates out of the constructor.
    """

    atomic_objs: tuple = ()
    config_obj: Mapping[str, Any] | None = None
    _config: BuildConfig | None = None

    def __init__(
        self,
        atomic_objs: list[Any],
        config: Mapping[str, Any],
        label_schemes: Mapping[str, LabelScheme] | None = None,
    ):
        """
        Initialize the engine and run the build.

        Args:
            atomic_objs: Catalog of atomic object definitions (mappings or
                         parsed models)
            config: Configuration mapping of atomic object id to gate, plus
                    the reserved `config` settings key
            label_schemes: Extra label schemes for custom-pattern groups,
                           keyed by the `suffixType` that selects them
        """
        self.build: Build = {}
        self.label_schemes: dict[str, LabelScheme] = dict(LABEL_SCHEMES)
        for name, scheme in (label_schemes or {}).items():
            check_label_scheme(name, scheme)
            self.label_schemes[name] = scheme

        self._expanded: list[tuple[str, str]] = []

        self.load_objects(atomic_objs)
        self.load_config(config)
        self.run()

    def load_objects(self, atomic_objs: Any) -> None:
        """
        Store the catalog.

        Raises:
            TypeError: If `atomic_objs` is not a list
            AtomicBuildError: If it is missing or empty
        """
        if atomic_objs is None:
            raise AtomicBuildError("No atomic objects given")
        require_sequence(atomic_objs, "atomic_objs")
        if not atomic_objs:
            raise AtomicBuildError("atomic_objs must not be empty")
        self.atomic_objs = tuple(atomic_objs)

    def load_config(self, config: Any) -> None:
        """
        Store and validate the configuration.

        Raises:
            TypeError: If `config` is not a mapping or a gate is malformed
            AtomicBuildError: If it is missing or empty
        """
        if config is None:
            raise AtomicBuildError("No config given")
        require_mapping(config, "config")
        if not config:
            raise AtomicBuildError("config must not be empty")
        self._config = BuildConfig.from_mapping(config)
        self.config_obj = config

    @property
    def settings(self) -> BuildSettings:
        """Global settings from the reserved `config` key."""
        return self._require_config().settings

    def flush(self) -> None:
        """Empty the build table."""
        self.build.clear()

    def _require_config(self) -> BuildConfig:
        if self._config is None:
            raise TypeError("Configuration has not been loaded")
        return self._config

    def add_pattern_rules(
        self,
        rules: Any,
        obj_id: Any,
        properties: Any,
        prefix: Any,
        is_custom: bool = False,
    ) -> bool:
        """
        Expand the members of a pattern into the build.

        Each accepted rule becomes `prefix + suffix` with its values zipped
        positionally against `properties`. Unless `is_custom` is set, a rule
        is only accepted when the configuration switches its suffix on.

        Args:
            rules: List of {suffix, values} rules
            obj_id: Atomic object id the configuration is keyed by
            properties: CSS properties, one per value
            prefix: Selector prefix
            is_custom: Bypass per-suffix gating (custom members)

        Returns:
            True if at least one selector was written

        Raises:
            TypeError: On arguments of the wrong type, or when the
                       configuration is missing or has no entry for `obj_id`
            AtomicBuildError: If a rule lacks `suffix`/`values` or has the
                              wrong number of values
        """
        require_sequence(rules, "rules")
        if not rules:
            return False
        require_string(obj_id, "id")
        require_sequence(properties, "properties")
        require_string(prefix, "prefix")

        accepted: Build = {}
        for i, rule in enumerate(rules):
            suffix, values = split_pattern_rule(rule, f"{obj_id}.rules[{i}]")
            if len(values) != len(properties):
                raise AtomicBuildError(
                    f"[{obj_id}] rule '{suffix}' has {len(values)} values "
                    f"for {len(properties)} properties"
                )
            if not is_custom and not self._require_config().is_suffix_enabled(obj_id, suffix):
                continue
            accepted[prefix + suffix] = dict(zip(properties, values))

        self.build.update(accepted)
        return bool(accepted)

    def add_custom_pattern_rules(
        self,
        config_group: Any,
        rules: Any,
        obj_id: Any,
        prefix: Any,
        suffix_type: Any,
        formats: Any,
    ) -> bool:
        """
        Expand a custom-pattern once per config group.

        Group `g` produces `prefix + suffix + "--" + label(g)` for every rule,
        where the rule's `values` name the CSS properties and the group's list
        under that suffix holds the declaration values.

        The group's values, taken in rule order, are checked one by one
        against `formats`. With rules `x` (2 properties) and `y`
        (1 property), `formats` needs three predicates.

        Args:
            config_group: List of up to 26 mappings of suffix -> values
            rules: List of {suffix, values} rules
            obj_id: Atomic object id (for error messages)
            prefix: Selector prefix
            suffix_type: Name of the label scheme
            formats: One predicate per custom value of a group

        Returns:
            True if at least one selector was written

        Raises:
            TypeError: On arguments of the wrong type or an unknown label scheme
            GroupRangeError: If there are more than 26 groups
            AtomicBuildError: On missing keys or mismatched value counts
            FormatValidationError: If a value fails its format
        """
        require_sequence(config_group, "config_group")
        require_sequence(rules, "rules")
        if not config_group or not rules:
            return False
        if len(config_group) > MAX_GROUPS:
            raise GroupRangeError(
                f"config_group has {len(config_group)} groups, at most {MAX_GROUPS} are supported"
            )
        require_string(obj_id, "id")
        require_string(prefix, "prefix")
        require_string(suffix_type, "suffix_type")
        require_callables(formats, "format")

        scheme = self.label_schemes.get(suffix_type)
        if scheme is None:
            raise TypeError(
                f"Unknown suffix type '{suffix_type}'. "
                f"Must be one of {', '.join(sorted(self.label_schemes))}"
            )

        parsed_rules = [
            split_pattern_rule(rule, f"{obj_id}.rules[{i}]") for i, rule in enumerate(rules)
        ]
        for index, group in enumerate(config_group):
            require_mapping(group, f"{obj_id} config group {index}")

        accepted: Build = {}
        for index, group in enumerate(config_group):
            label = scheme(index)
            custom_values: list[tuple[str, Any]] = []

            for suffix, properties in parsed_rules:
                if suffix not in group:
                    raise AtomicBuildError(
                        f"[{obj_id}] group '{label}' has no values for suffix '{suffix}'"
                    )
                values = require_sequence(group[suffix], f"{obj_id} group '{label}'.{suffix}")
                if len(values) != len(properties):
                    raise AtomicBuildError(
                        f"[{obj_id}] group '{label}', suffix '{suffix}': expected "
                        f"{len(properties)} values, got {len(values)}"
                    )
                custom_values.extend((suffix, value) for value in values)
                accepted[f"{prefix}{suffix}--{label}"] = dict(zip(properties, values))

            if len(custom_values) != len(formats):
                raise AtomicBuildError(
                    f"[{obj_id}] group '{label}' has {len(custom_values)} values "
                    f"but the format expects {len(formats)}"
                )
            for position, ((suffix, value), predicate) in enumerate(zip(custom_values, formats)):
                if not predicate(value):
                    raise FormatValidationError(obj_id, label, suffix, position, value)

        self.build.update(accepted)
        return bool(accepted)

    def add_rule(self, rule: Any, obj_id: Any) -> bool:
        """
        Merge a literal rule block into the build if its id is switched on.

        Returns:
            True if the rule was merged

        Raises:
            TypeError: If `rule` is not a mapping, `obj_id` is not a string,
                       or the configuration has no entry for `obj_id`
        """
        require_mapping(rule, "rule")
        require_string(obj_id, "id")

        if not self._require_config().is_enabled(obj_id):
            return False

        for selector, block in rule.items():
            self.build[selector] = dict(require_mapping(block, f"rule['{selector}']"))
        return True

    def run(self) -> None:
        """
        Expand every atomic object, in catalog order.

        Raises:
            TypeError: If a definition or gate has the wrong shape, or an
                       atomic object has no configuration entry
            AtomicBuildError: On unknown kinds, custom members for a pattern
                              that does not allow them, or invalid values
        """
        config = self._require_config()
        self._expanded = []

        for index, entry in enumerate(self.atomic_objs):
            atomic_obj = parse_atomic_object(entry, index)

            if isinstance(atomic_obj, RuleObject):
                self.add_rule(atomic_obj.rule, atomic_obj.id)
            elif isinstance(atomic_obj, PatternObject):
                self._run_pattern(atomic_obj, config)
            elif isinstance(atomic_obj, CustomPatternObject):
                self.add_custom_pattern_rules(
                    config.config_group(atomic_obj.id),
                    atomic_obj.rules,
                    atomic_obj.id,
                    atomic_obj.prefix,
                    atomic_obj.suffix_type,
                    atomic_obj.format,
                )
            else:
                assert_never(atomic_obj)

            self._expanded.append((atomic_obj.id, atomic_obj.kind))
            logger.debug(
                f"Expanded atomic object '{atomic_obj.id}'",
                extra={"atomic_id": atomic_obj.id, "kind": atomic_obj.kind},
            )

        logger.info(
            f"Build complete: {len(self.build)} selectors",
            extra={"selectors": len(self.build), "expanded_objects": len(self._expanded)},
        )

    def _run_pattern(self, atomic_obj: PatternObject, config: BuildConfig) -> None:
        self.add_pattern_rules(
            atomic_obj.rules, atomic_obj.id, atomic_obj.properties, atomic_obj.prefix
        )

        custom = config.custom_rules(atomic_obj.id)
        # null, false and "" count as absent; an empty list does not
        if custom is None or (not custom and not is_sequence(custom)):
            return
        if not atomic_obj.allow_custom:
            raise AtomicBuildError(f"custom not permitted for atomic object '{atomic_obj.id}'")
        require_sequence(custom, f"config.{atomic_obj.id}.custom")
        self.add_pattern_rules(
            custom, atomic_obj.id, atomic_obj.properties, atomic_obj.prefix, is_custom=True
        )

    def get_build(self) -> dict[str, Any]:
        """
        Return a copy of the build, nested under the namespace if one is set.

        Raises:
            TypeError: If the configuration has not been loaded
        """
        config = self._require_config()
        build = {selector: dict(block) for selector, block in self.build.items()}
        if config.namespace:
            return {config.namespace: build}
        return build

    def get_build_summary(self) -> dict[str, Any]:
        """
        Get summary of the last run.

        Returns:
            Dictionary with selector count, expanded objects by kind and
            the configured namespace
        """
        return {
            "total_selectors": len(self.build),
            "objects_by_kind": self._count_by_kind(),
            "namespace": self._require_config().namespace,
        }

    def _count_by_kind(self) -> dict[str, int]:
        """Count expanded atomic objects by kind."""
        counts: dict[str, int] = {}
        for _, kind in self._expanded:
            counts[kind] = counts.get(kind, 0) + 1
        return counts
