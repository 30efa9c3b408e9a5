"""Tests for package.json merging (create_ferod_app.scaffolder.manifest)."""

from __future__ import annotations

import copy
from pathlib import Path

import pytest

from create_ferod_app.scaffolder.manifest import load_manifests, merge_manifests

pytestmark = pytest.mark.unit


class TestMergeManifests:
    def test_later_scripts_win(self):
        merged = merge_manifests("demo", [
            {"scripts": {"build": "x"}},
            {"scripts": {"build": "y", "test": "z"}},
        ])
        assert merged["scripts"] == {"build": "y", "test": "z"}

    def test_dependencies_are_unioned(self):
        merged = merge_manifests("demo", [
            {"dependencies": {"a": "1"}, "devDependencies": {"x": "1"}},
            {"dependencies": {"b": "2"}},
            {"dependencies": {"a": "3"}, "devDependencies": {"y": "2"}},
        ])
        assert merged["dependencies"] == {"a": "3", "b": "2"}
        assert merged["devDependencies"] == {"x": "1", "y": "2"}

    def test_name_replaced(self):
        merged = merge_manifests("demo", [{"name": "template-base"}])
        assert merged["name"] == "demo"

    def test_name_set_when_base_has_none(self):
        assert merge_manifests("demo", [{}])["name"] == "demo"

    def test_base_fields_preserved(self):
        base = {"name": "x", "version": "1.2.3", "private": True, "engines": {"node": ">=18"}}
        overlay = {"version": "9.9.9", "license": "GPL"}
        merged = merge_manifests("demo", [base, overlay])
        assert merged["version"] == "1.2.3"
        assert merged["private"] is True
        assert merged["engines"] == {"node": ">=18"}
        assert "license" not in merged

    def test_missing_mappings_become_empty(self):
        merged = merge_manifests("demo", [{"name": "x"}])
        assert merged["scripts"] == {}
        assert merged["dependencies"] == {}
        assert merged["devDependencies"] == {}

    def test_null_mappings_tolerated(self):
        merged = merge_manifests("demo", [{"scripts": None}, {"scripts": {"a": "b"}}])
        assert merged["scripts"] == {"a": "b"}

    def test_inputs_not_mutated(self):
        manifests = [
            {"name": "x", "scripts": {"build": "x"}},
            {"scripts": {"build": "y"}},
        ]
        snapshot = copy.deepcopy(manifests)
        merge_manifests("demo", manifests)
        assert manifests == snapshot

    def test_key_order_follows_first_appearance(self):
        merged = merge_manifests("demo", [
            {"scripts": {"start": "a", "build": "b"}},
            {"scripts": {"dev": "c", "start": "d"}},
        ])
        assert list(merged["scripts"]) == ["start", "build", "dev"]

    def test_empty_input_rejected(self):
        with pytest.raises(ValueError):
            merge_manifests("demo", [])

    def test_accepts_generator(self):
        merged = merge_manifests("demo", (m for m in [{"scripts": {"a": "1"}}]))
        assert merged["scripts"] == {"a": "1"}


class TestLoadManifests:
    def test_loads_in_order(self, templates_dir: Path):
        manifests = load_manifests(templates_dir, ["base", "base-ts"])
        assert manifests[0]["name"] == "template-base"
        assert manifests[1]["scripts"]["build"] == "tsc"

    def test_missing_manifest_raises(self, templates_dir: Path):
        (templates_dir / "empty").mkdir()
        with pytest.raises(FileNotFoundError):
            load_manifests(templates_dir, ["base", "empty"])
