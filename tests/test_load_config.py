"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from doxymark.deep_merge import deep_merge
from doxymark.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    base = {"kinds": ["class"]}
    update = {"kinds": ["struct"]}
    assert deep_merge(base, update) == {"kinds": ["struct"]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["compounds"]["kinds"] == ["class"]
    assert config["output"]["subdir"] == "md"
    assert config["output"]["toc_file"] == "TOC.md"


def test_load_config_is_a_copy() -> None:
    """Verify callers cannot mutate the shared defaults."""
    config = load_config(None)
    config["output"]["subdir"] = "changed"
    assert DEFAULT_CONFIG["output"]["subdir"] == "md"


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {"output": {"toc_title": "API"}, "compounds": {"kinds": ["struct"]}}
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["output"]["toc_title"] == "API"
    assert loaded["output"]["toc_file"] == "TOC.md"  # Default
    assert loaded["compounds"]["kinds"] == ["struct"]


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_deep_merge_leaves_inputs_untouched() -> None:
    """Verify neither the defaults nor the override are modified."""
    base = {"output": {"subdir": "md", "indent": "  "}}
    update = {"output": {"subdir": "api"}}
    merged = deep_merge(base, update)
    assert merged == {"output": {"subdir": "api", "indent": "  "}}
    assert base == {"output": {"subdir": "md", "indent": "  "}}
    assert update == {"output": {"subdir": "api"}}
