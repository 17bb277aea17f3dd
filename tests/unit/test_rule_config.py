"""
Unit tests for catalog and configuration loading.
"""

import json

import pytest

from atomic_builder.core.rules import AtomicBuilder, CatalogBuilder, CatalogLoader, ConfigLoader
from atomic_builder.core.validators import FORMAT_REGISTRY, RegexFormat


CATALOG_YAML = """
objects:
  - kind: rule
    id: clearfix
    rule:
      ".cf:after":
        content: '""'
        display: table

  - kind: pattern
    id: font-weight
    prefix: ".Fw-"
    properties: [font-weight]
    rules:
      - {suffix: n, values: [normal]}
      - {suffix: "7", values: [700]}

  - kind: custom-pattern
    id: border
    prefix: ".Bd-"
    suffixType: alphabet
    format: [border, {regex: "[a-z]+"}]
    rules:
      - {suffix: t, values: [border-top]}
      - {suffix: c, values: [border-color]}
"""


class TestCatalogLoader:
    """Tests for CatalogLoader"""

    def test_load_objects_from_yaml(self, tmp_path):
        path = tmp_path / "atoms.yaml"
        path.write_text(CATALOG_YAML)

        objects = CatalogLoader(path).load_objects()

        assert [obj["id"] for obj in objects] == ["clearfix", "font-weight", "border"]
        border_format = objects[2]["format"]
        assert border_format[0] is FORMAT_REGISTRY["border"]
        assert isinstance(border_format[1], RegexFormat)

    def test_loaded_objects_build(self, tmp_path):
        path = tmp_path / "atoms.yaml"
        path.write_text(CATALOG_YAML)

        builder = AtomicBuilder(
            CatalogLoader(path).load_objects(),
            {
                "clearfix": False,
                "font-weight": {"7": True},
                "border": [{"t": ["1px solid #000"], "c": ["red"]}],
            },
        )

        assert builder.build == {
            ".Fw-7": {"font-weight": "700"},
            ".Bd-t--a": {"border-top": "1px solid #000"},
            ".Bd-c--a": {"border-color": "red"},
        }

    def test_load_bare_list_from_json(self, tmp_path):
        path = tmp_path / "atoms.json"
        path.write_text(json.dumps([
            {"kind": "rule", "id": "hidden", "rule": {".hidden": {"display": "none"}}},
        ]))

        objects = CatalogLoader(path).load_objects()

        assert objects == [{"kind": "rule", "id": "hidden", "rule": {".hidden": {"display": "none"}}}]

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            CatalogLoader("/nonexistent/path/atoms.yaml")

    def test_missing_objects_section(self, tmp_path):
        path = tmp_path / "atoms.yaml"
        path.write_text("rules: []\n")

        with pytest.raises(ValueError) as exc_info:
            CatalogLoader(path).load_objects()

        assert "objects" in str(exc_info.value)

    def test_entry_not_a_mapping(self, tmp_path):
        path = tmp_path / "atoms.yaml"
        path.write_text("- just a string\n")

        with pytest.raises(ValueError):
            CatalogLoader(path).load_objects()

    def test_unknown_format_name(self, tmp_path):
        path = tmp_path / "atoms.yaml"
        path.write_text(
            "- kind: custom-pattern\n"
            "  id: shadow\n"
            "  prefix: .Bxsh-\n"
            "  suffixType: alphabet\n"
            "  format: [shadow]\n"
        )

        with pytest.raises(ValueError) as exc_info:
            CatalogLoader(path).load_objects()

        assert "shadow" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "atoms.yaml"
        path.write_text("objects: [unclosed\n")

        with pytest.raises(ValueError):
            CatalogLoader(path).load_objects()


class TestConfigLoader:
    """Tests for ConfigLoader"""

    def test_load_config(self, tmp_path):
        path = tmp_path / "atomic.yaml"
        path.write_text(
            "config:\n"
            "  namespace: '#atomic'\n"
            "font-weight:\n"
            "  b: true\n"
        )

        config = ConfigLoader(path).load_config()

        assert config == {"config": {"namespace": "#atomic"}, "font-weight": {"b": True}}

    def test_config_must_be_a_mapping(self, tmp_path):
        path = tmp_path / "atomic.yaml"
        path.write_text("- font-weight\n")

        with pytest.raises(ValueError):
            ConfigLoader(path).load_config()

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            ConfigLoader("/nonexistent/path/atomic.yaml")


class TestCatalogBuilder:
    """Tests for CatalogBuilder"""

    def test_builder_fluent_interface(self):
        catalog = CatalogBuilder() \
            .add_rule("hidden", {".hidden": {"display": "none"}}) \
            .add_pattern("display", ".D-", ["display"], {"b": "block", "ib": ["inline-block"]}) \
            .add_custom_pattern("color", ".C-", {"": ["color"]}, ["color"]) \
            .build()

        assert [obj["kind"] for obj in catalog] == ["rule", "pattern", "custom-pattern"]
        assert catalog[1]["rules"] == [
            {"suffix": "b", "values": ["block"]},
            {"suffix": "ib", "values": ["inline-block"]},
        ]
        assert catalog[2]["format"] == [FORMAT_REGISTRY["color"]]

    def test_builder_output_builds(self):
        catalog = CatalogBuilder() \
            .add_pattern("display", ".D-", ["display"], {"b": "block", "n": "none"}, allow_custom=True) \
            .add_custom_pattern("color", ".C-", {"": ["color"]}, ["color"]) \
            .build()

        builder = AtomicBuilder(catalog, {
            "display": {"n": True, "custom": [{"suffix": "g", "values": ["grid"]}]},
            "color": [{"": ["#fff"]}, {"": ["#000"]}],
        })

        assert builder.build == {
            ".D-n": {"display": "none"},
            ".D-g": {"display": "grid"},
            ".C---a": {"color": "#fff"},
            ".C---b": {"color": "#000"},
        }
