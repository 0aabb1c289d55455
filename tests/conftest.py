"""
Test configuration and fixtures for the template engine.

Every test runs against the built-in engine configuration unless it builds
its own, so a local conf/ or TEMPLATEGEN_CONFIG never leaks into results.
"""

import os
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from templategen.core import CONFIG_ENV_VAR, GeneratorCfg
from templategen.design.sdk import StyleOptions


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Never pick up a developer's config override"""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


@pytest.fixture
def engine_cfg():
    """Default engine configuration"""
    return GeneratorCfg()


@pytest.fixture
def default_options():
    """The options from the end-to-end example"""
    return StyleOptions(
        style="minimal",
        base_hue=210,
        color_scheme="monochromatic",
        typography="Modern Sans",
        layout="classic-document",
        seed=0.5,
    )


@pytest.fixture
def sample_palette():
    return ["#3b82f6", "#93c5fd", "#1e40af", "#f8fafc", "#0f172a"]


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config and return its path"""

    def _write(text):
        path = tmp_path / "templategen.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def reset_logging():
    """Restore the package logger to the built-in level with no log file"""
    from templategen.core import configure_logging

    yield
    configure_logging(GeneratorCfg())
