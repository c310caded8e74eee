"""Tests for the graph index, dependency walker and component index."""

import logging

import pytest

from depcalc.analysis import ComponentIndex, DependencyWalker, GraphIndex
from depcalc.errors import AmbiguousRollupOwnerError
from depcalc.models import Condition, ModuleDefinition


def _walker(module_map, **kwargs):
    return DependencyWalker(GraphIndex(module_map, **kwargs))


# ── Graph Index ───────────────────────────────────────────────

class TestGraphIndex:
    def test_empty(self):
        index = GraphIndex({})
        assert len(index) == 0
        assert index.get("a") is None
        assert index.rollups == {}

    def test_accepts_definitions_and_raw_entries(self):
        index = GraphIndex({
            "a": ModuleDefinition(requires=("b",)),
            "b": {"optional": ["c"]},
        })
        assert index.get("a").requires == ("b",)
        assert index.get("b").optional == ("c",)
        assert "a" in index
        assert "c" not in index

    def test_rollup_owners(self):
        index = GraphIndex({"r": {"use": ["a", "b"]}, "a": {}, "b": {}})
        assert index.rollup_owner("a") == "r"
        assert index.rollup_owner("b") == "r"
        assert index.rollup_owner("r") is None

    def test_reverse_edges(self):
        index = GraphIndex({
            "a": {"requires": ["c"]},
            "b": {"optional": ["c"], "requires": ["c"]},
            "c": {},
        })
        assert index.dependents("c") == ["a", "b"]
        assert index.dependents("a") == []

    def test_condition_tables(self):
        index = GraphIndex({"a": {}, "b": {"condition": {"name": "b", "trigger": "a"}}})
        assert index.conditional_modules("a") == ["b"]
        assert index.condition_triggers("b") == ["a"]
        assert index.get("b").condition == Condition(name="b", trigger="a")

    def test_ambiguous_rollup_last_wins(self, caplog):
        with caplog.at_level(logging.WARNING, logger="depcalc.analysis.graph_index"):
            index = GraphIndex({
                "r1": {"use": ["c"]},
                "r2": {"use": ["c"]},
                "c": {},
            })
        assert index.rollup_owner("c") == "r2"
        assert "used by rollups r1, r2" in caplog.text

    def test_ambiguous_rollup_strict(self):
        with pytest.raises(AmbiguousRollupOwnerError) as exc_info:
            GraphIndex({"r1": {"use": ["c"]}, "r2": {"use": ["c"]}}, strict_rollups=True)
        assert exc_info.value.module_id == "c"
        assert exc_info.value.owners == ["r1", "r2"]

    def test_same_rollup_listing_twice_is_not_ambiguous(self):
        index = GraphIndex({"r": {"use": ["c", "c"]}}, strict_rollups=True)
        assert index.rollup_owner("c") == "r"


# ── Dependency Walker ─────────────────────────────────────────

class TestDependencyWalker:
    def test_unknown_start(self):
        walker = _walker({"a": {}})
        assert walker.upstream("missing") == set()
        assert walker.downstream("missing") == set()

    def test_lone_module(self):
        walker = _walker({"a": {}})
        assert walker.upstream("a") == {"a"}
        assert walker.downstream("a") == {"a"}

    def test_upstream_requires_and_optional(self):
        walker = _walker({
            "a": {"requires": ["b"], "optional": ["c"]},
            "b": {"requires": ["d"]},
            "c": {},
            "d": {},
        })
        assert walker.upstream("a") == {"a", "b", "c", "d"}
        assert walker.upstream("b") == {"b", "d"}

    def test_downstream_reverse_edges(self):
        walker = _walker({
            "a": {"requires": ["b"]},
            "b": {"optional": ["c"]},
            "c": {},
            "x": {},
        })
        assert walker.downstream("c") == {"a", "b", "c"}
        assert walker.walk("c", upstream=False) == walker.downstream("c")

    def test_cycle_terminates(self):
        walker = _walker({
            "a": {"requires": ["b"]},
            "b": {"requires": ["c"]},
            "c": {"requires": ["a"]},
        })
        assert walker.upstream("a") == {"a", "b", "c"}
        assert walker.downstream("b") == {"a", "b", "c"}

    def test_rollup_cycle_terminates(self):
        walker = _walker({
            "a": {"requires": ["r1"]},
            "r1": {"use": ["r2"]},
            "r2": {"use": ["r1"]},
        })
        assert walker.upstream("a") == {"a"}

    def test_rollup_start_is_unwrapped(self):
        walker = _walker({"r": {"use": ["a", "b"]}, "a": {}, "b": {}})
        assert walker.upstream("r") == {"a", "b"}

    def test_nested_rollups(self):
        walker = _walker({
            "top": {"use": ["mid", "x"]},
            "mid": {"use": ["y"]},
            "x": {},
            "y": {},
        })
        assert walker.upstream("top") == {"x", "y"}

    def test_downstream_reaches_rollup_dependents(self):
        walker = _walker({
            "app": {"requires": ["bundle"]},
            "bundle": {"use": ["core", "extra"]},
            "core": {},
            "extra": {},
        })
        assert walker.downstream("core") == {"app", "core", "extra"}

    def test_conditional_upstream(self):
        walker = _walker({
            "a": {"requires": ["b"]},
            "b": {},
            "b-ie": {"requires": ["ie-shim"], "condition": {"name": "b-ie", "trigger": "b"}},
            "ie-shim": {},
        })
        assert walker.upstream("a") == {"a", "b", "b-ie", "ie-shim"}

    def test_conditional_downstream_reaches_trigger(self):
        walker = _walker({
            "a": {"requires": ["b"]},
            "b": {},
            "b-ie": {"condition": {"name": "b-ie", "trigger": "b"}},
        })
        assert walker.downstream("b-ie") == {"a", "b", "b-ie"}
        assert walker.downstream("b") == {"a", "b"}

    def test_dangling_reference_included_not_expanded(self):
        walker = _walker({"a": {"requires": ["ghost"]}})
        assert walker.upstream("a") == {"a", "ghost"}
        assert walker.downstream("ghost") == set()

    def test_undefined_condition_trigger_not_reported_downstream(self):
        walker = _walker({"b": {"condition": {"name": "b", "trigger": "ghost"}}})
        assert walker.downstream("b") == {"b"}


# ── Component Index ───────────────────────────────────────────

class TestComponentIndex:
    def test_empty(self):
        index = ComponentIndex()
        assert not index
        assert index.lookup(["a"]) == []
        assert index.modules_of("x") == []

    def test_lookup(self):
        index = ComponentIndex({"x": ["a", "b"], "y": ["b", "c"], "z": ["d"]})
        assert index.lookup(["b"]) == ["x", "y"]
        assert index.lookup(["a", "d"]) == ["x", "z"]
        assert index.lookup(["missing"]) == []

    def test_duplicates_in_component(self):
        index = ComponentIndex({"x": ["a", "a"]})
        assert index.lookup(["a", "a"]) == ["x"]
        assert index.modules_of("x") == ["a", "a"]

    def test_modules_of_returns_copy(self):
        index = ComponentIndex({"x": ["a"]})
        index.modules_of("x").append("b")
        assert index.modules_of("x") == ["a"]
