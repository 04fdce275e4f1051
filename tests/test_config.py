# rgbsync - Unit tests for the configuration hierarchy
"""
Tests for rgbsync.config.

Tests cover:
- Parent traversal for unset fields
- Type coercion and schema validation
- YAML loading
"""

from __future__ import annotations

from enum import Enum

import pytest

from rgbsync.config import Configuration
from rgbsync.errors import ConfigurationError


class Shade(Enum):
    LIGHT = 1
    DARK = 2


Sample = Configuration.create(
    "Sample",
    [
        ("name", str),
        ("shade", Shade),
        ("level", int),
        ("enabled", bool),
        ("tags", tuple),
        ("members", frozenset),
    ],
)

Flat = Configuration.create("Flat", [("name", str), ("level", int)], hierarchical=False)

# ─────────────────────────────────────────────────────────────────────────────
# Hierarchy
# ─────────────────────────────────────────────────────────────────────────────


class TestHierarchy:
    def test_child_inherits_unset_fields(self):
        root = Sample(name="root", level=3)
        child = Sample(parent=root, name="child")

        assert child.name == "child"
        assert child.level == 3
        assert child.shade is None
        assert root.children == (child,)

    def test_search_and_leaves(self):
        root = Sample.from_mapping(
            {"name": "root", "children": [{"name": "a"}, {"name": "b", "children": [{"name": "c"}]}]}
        )

        assert [x.name for x in root.leaves()] == ["a", "c"]
        assert [x.name for x in root.search("name", "b")] == ["b"]

    def test_flat_type_not_tracked_by_parent(self):
        root = Flat(level=3)
        children = [Flat(parent=root, name=str(i)) for i in range(5)]

        assert root.children is None
        assert all(child.level == 3 for child in children)

    def test_flat_type_rejects_children(self):
        with pytest.raises(ConfigurationError):
            Flat.from_mapping({"name": "root", "children": [{"name": "a"}]})

    def test_get(self):
        config = Sample(level=0)
        assert config.get("level") == 0
        assert config.get("name", "fallback") == "fallback"
        with pytest.raises(AttributeError):
            config.get("bogus")

    def test_read_only(self):
        with pytest.raises(AttributeError):
            Sample().name = "x"

    def test_requires_create(self):
        with pytest.raises(TypeError):
            Configuration()


# ─────────────────────────────────────────────────────────────────────────────
# Coercion
# ─────────────────────────────────────────────────────────────────────────────


class TestCoercion:
    def test_types(self):
        config = Sample.from_mapping(
            {"shade": "dark", "level": "7", "enabled": True, "tags": ["x", "y"], "members": ["m"]}
        )

        assert config.shade == Shade.DARK
        assert config.level == 7
        assert config.enabled is True
        assert config.tags == ("x", "y")
        assert config.members == frozenset(["m"])

    def test_enum_by_value(self):
        assert Sample.from_mapping({"shade": 1}).shade == Shade.LIGHT

    def test_scalar_becomes_collection(self):
        assert Sample.from_mapping({"tags": "solo"}).tags == ("solo",)

    @pytest.mark.parametrize(
        "mapping",
        [
            {"unknown": 1},
            {"shade": "plaid"},
            {"level": "many"},
            {"enabled": "yes"},
            {"name": ["a", "b"]},
            {"level": {"a": 1}},
        ],
    )
    def test_rejected(self, mapping):
        with pytest.raises(ConfigurationError):
            Sample.from_mapping(mapping)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            Sample.from_mapping(["a"])


# ─────────────────────────────────────────────────────────────────────────────
# YAML
# ─────────────────────────────────────────────────────────────────────────────


class TestYaml:
    def test_load(self, tmp_path):
        path = tmp_path / "sample.yaml"
        path.write_text("name: loaded\nshade: light\ntags: [a]\n")

        config = Sample.load_yaml(str(path))
        assert config.name == "loaded"
        assert config.shade == Shade.LIGHT
        assert config.tags == ("a",)

    def test_load_with_parent(self, tmp_path):
        path = tmp_path / "child.yaml"
        path.write_text("name: child\n")

        config = Sample.load_yaml(str(path), parent=Sample(level=9))
        assert config.level == 9

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert Sample.load_yaml(str(path), parent=Sample(name="p")).name == "p"

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("name: [unclosed\n")

        with pytest.raises(ConfigurationError):
            Sample.load_yaml(str(path))
