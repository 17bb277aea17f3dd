"""
Catalog and configuration management.

Loads atomic object catalogs and build configurations from YAML (or JSON)
files and provides a builder for assembling catalogs in code.
"""

from pathlib import Path
from typing import Any, Callable

import yaml

from atomic_builder.core.validators import resolve_format


def _read_document(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse {path}: {e}")


class CatalogLoader:
    """
    Loads atomic object definitions from a YAML or JSON file.

    Expected YAML format:
    ```yaml
    objects:
      - kind: pattern
        id: font-weight
        prefix: ".Fw-"
        properties: [font-weight]
        allowCustom: true
        rules:
          - {suffix: n, values: [normal]}
          - {suffix: b, values: [bold]}

      - kind: custom-pattern
        id: border
        prefix: ".Bd-"
        suffixType: alphabet
        format: [border, border]
        rules:
          - {suffix: x, values: [border-left, border-right]}
    ```

    A bare list of definitions is accepted as well. Format names are
    resolved to predicates; `{regex: "<pattern>"}` builds an ad hoc one.
    """

    def __init__(self, catalog_path: str | Path):
        """
        Initialize the catalog loader.

        Args:
            catalog_path: Path to the catalog file
        """
        self.catalog_path = Path(catalog_path)
        if not self.catalog_path.exists():
            raise FileNotFoundError(f"Atomic object catalog not found: {catalog_path}")

    def load_objects(self) -> list[dict[str, Any]]:
        """
        Load and parse atomic object definitions.

        Returns:
            List of definition dictionaries suitable for AtomicBuilder

        Raises:
            ValueError: If the document is invalid or a format is unknown
        """
        document = _read_document(self.catalog_path)

        if isinstance(document, dict):
            document = document.get("objects")
        if not isinstance(document, list) or not document:
            raise ValueError("Catalog must be a non-empty list or contain an 'objects' list")

        return [self._parse_object(obj_def, idx) for idx, obj_def in enumerate(document)]

    def _parse_object(self, obj_def: Any, idx: int) -> dict[str, Any]:
        """
        Resolve named formats of a single definition.

        Shape checks beyond what is needed here are left to the engine.

        Raises:
            ValueError: If the definition is not a mapping or a format is unknown
        """
        if not isinstance(obj_def, dict):
            raise ValueError(f"Catalog entry {idx} must be a mapping")

        obj = dict(obj_def)
        if obj.get("kind") == "custom-pattern" and isinstance(obj.get("format"), list):
            try:
                obj["format"] = [resolve_format(entry) for entry in obj["format"]]
            except ValueError as e:
                raise ValueError(f"Atomic object '{obj.get('id', idx)}': {e}")
        return obj


class ConfigLoader:
    """
    Loads a build configuration from a YAML or JSON file.
    """

    def __init__(self, config_path: str | Path):
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Build configuration not found: {config_path}")

    def load_config(self) -> dict[str, Any]:
        """
        Load the raw configuration mapping.

        Raises:
            ValueError: If the document is not a mapping
        """
        document = _read_document(self.config_path)
        if not isinstance(document, dict):
            raise ValueError("Configuration file must contain a mapping of atomic object ids")
        return document


class CatalogBuilder:
    """
    Programmatically build atomic object catalogs (for testing or dynamic catalogs).
    """

    def __init__(self):
        """Initialize empty catalog."""
        self.objects: list[dict[str, Any]] = []

    def add_rule(self, obj_id: str, rule: dict[str, dict[str, str]], name: str | None = None) -> "CatalogBuilder":
        """Add a literal rule block."""
        self.objects.append({
            "kind": "rule",
            "id": obj_id,
            "name": name,
            "rule": rule,
        })
        return self

    def add_pattern(
        self,
        obj_id: str,
        prefix: str,
        properties: list[str],
        rules: dict[str, list[str] | str],
        allow_custom: bool = False,
    ) -> "CatalogBuilder":
        """
        Add a pattern.

        `rules` maps each suffix to its values; a single string stands for a
        one-value list.
        """
        self.objects.append({
            "kind": "pattern",
            "id": obj_id,
            "prefix": prefix,
            "properties": properties,
            "rules": [
                {"suffix": suffix, "values": [values] if isinstance(values, str) else list(values)}
                for suffix, values in rules.items()
            ],
            "allowCustom": allow_custom,
        })
        return self

    def add_custom_pattern(
        self,
        obj_id: str,
        prefix: str,
        rules: dict[str, list[str]],
        formats: list[str | Callable[[Any], bool]],
        suffix_type: str = "alphabet",
    ) -> "CatalogBuilder":
        """Add a custom-pattern; `rules` maps each suffix to the properties it sets."""
        self.objects.append({
            "kind": "custom-pattern",
            "id": obj_id,
            "prefix": prefix,
            "suffixType": suffix_type,
            "format": [resolve_format(entry) for entry in formats],
            "rules": [{"suffix": suffix, "values": list(values)} for suffix, values in rules.items()],
        })
        return self

    def build(self) -> list[dict[str, Any]]:
        """Build and return the catalog."""
        return self.objects
