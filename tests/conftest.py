"""
Pytest configuration and fixtures for atomic-builder tests

This module provides shared fixtures for unit and integration tests.
"""
import logging

import pytest

from atomic_builder.observability.logger import ROOT_LOGGER


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the filesystem"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that load files and write CSS"
    )


# =======================
# CATALOG FIXTURES
# =======================

@pytest.fixture
def sample_catalog() -> list[dict]:
    """
    A catalog with one atomic object of each kind

    Returns:
        List of raw atomic object definitions
    """
    return [
        {
            "kind": "rule",
            "id": "clearfix",
            "name": "Clearfix",
            "rule": {
                ".cf:after": {"content": '""', "display": "table", "clear": "both"},
            },
        },
        {
            "kind": "pattern",
            "id": "font-weight",
            "name": "Font weight",
            "prefix": ".Fw-",
            "properties": ["font-weight"],
            "allowCustom": True,
            "rules": [
                {"suffix": "n", "values": ["normal"]},
                {"suffix": "b", "values": ["bold"]},
            ],
        },
        {
            "kind": "pattern",
            "id": "float",
            "name": "Float",
            "prefix": ".Fl-",
            "properties": ["float"],
            "rules": [
                {"suffix": "start", "values": ["__START__"]},
                {"suffix": "end", "values": ["__END__"]},
            ],
        },
        {
            "kind": "custom-pattern",
            "id": "border",
            "name": "Border",
            "prefix": ".Bd-",
            "suffixType": "alphabet",
            "format": [lambda value: True] * 3,
            "rules": [
                {"suffix": "x", "values": ["border-left", "border-right"]},
                {"suffix": "t", "values": ["border-top"]},
            ],
        },
    ]


@pytest.fixture
def sample_config() -> dict:
    """
    A configuration enabling part of sample_catalog

    Returns:
        Raw configuration mapping
    """
    return {
        "config": {
            "namespace": "#atomic",
            "start": "left",
            "end": "right",
        },
        "clearfix": True,
        "font-weight": {
            "n": False,
            "b": True,
            "custom": [{"suffix": "600", "values": ["600"]}],
        },
        "float": {"start": True, "end": True},
        "border": [
            {"x": ["1px solid #000", "1px solid #111"], "t": ["2px dashed red"]},
        ],
    }


# =======================
# CLEANUP FIXTURES
# =======================

@pytest.fixture(autouse=True, scope="function")
def reset_package_logger():
    """
    Drop handlers installed by setup_logger() after each test

    The CLI binds its handler to the current stderr, which pytest swaps
    out per test.
    """
    yield
    logging.getLogger(ROOT_LOGGER).handlers.clear()
