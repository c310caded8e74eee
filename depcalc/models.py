"""Data models for the dependency calculator."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from depcalc.errors import ModuleMapError


_LIST_FIELDS = ("requires", "optional", "use")


@dataclass(frozen=True)
class Condition:
    """Pull ``name`` in whenever ``trigger`` is visited."""
    name: str
    trigger: str


@dataclass(frozen=True)
class ModuleDefinition:
    """Dependency metadata for one module id."""
    requires: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    use: tuple[str, ...] = ()  # non-empty for rollups
    condition: Condition | None = None

    @property
    def is_rollup(self) -> bool:
        return bool(self.use)

    @property
    def dependencies(self) -> tuple[str, ...]:
        """Hard and soft upstream edges; both are walked the same way."""
        return self.requires + self.optional

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], module_id: str = "?") -> ModuleDefinition:
        if not isinstance(raw, Mapping):
            raise ModuleMapError(f"Module {module_id!r}: expected an object, got {type(raw).__name__}")

        values: dict[str, tuple[str, ...]] = {}
        for key in _LIST_FIELDS:
            values[key] = _string_list(raw.get(key), module_id, key)

        condition = None
        raw_condition = raw.get("condition")
        if raw_condition is not None:
            if not isinstance(raw_condition, Mapping):
                raise ModuleMapError(f"Module {module_id!r}: 'condition' must be an object")
            name = raw_condition.get("name")
            trigger = raw_condition.get("trigger")
            if not isinstance(name, str) or not isinstance(trigger, str):
                raise ModuleMapError(
                    f"Module {module_id!r}: 'condition' needs string 'name' and 'trigger'"
                )
            condition = Condition(name=name, trigger=trigger)

        return cls(condition=condition, **values)


def _string_list(value: Any, module_id: str, key: str) -> tuple[str, ...]:
    if value is None:
        return ()
    # A bare string is shorthand for a one-element list
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ModuleMapError(f"Module {module_id!r}: {key!r} must be a list of strings")


def parse_module_map(raw: Any) -> dict[str, ModuleDefinition]:
    """Parse a raw module map document into ModuleDefinitions."""
    if not isinstance(raw, Mapping):
        raise ModuleMapError(f"Module map must be an object, got {type(raw).__name__}")
    return {
        module_id: ModuleDefinition.from_dict(entry, module_id)
        for module_id, entry in raw.items()
    }


@dataclass
class DependencySet:
    """Modules and components on one side of the source modules."""
    modules: list[str] = field(default_factory=list)
    components: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "components": list(self.components),
            "modules": list(self.modules),
        }


@dataclass
class DependencyTree:
    """Result of a single resolve call."""
    source: list[str] = field(default_factory=list)
    upstream: DependencySet = field(default_factory=DependencySet)
    downstream: DependencySet = field(default_factory=DependencySet)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": list(self.source),
            "upstream": self.upstream.to_dict(),
            "downstream": self.downstream.to_dict(),
        }


@dataclass(frozen=True)
class ResolverConfig:
    """Configuration for a Resolver.

    ``module_map`` values may be ModuleDefinitions or raw document entries;
    the Resolver normalizes them once at construction.
    """
    module_map: Mapping[str, Any] = field(default_factory=dict)
    component_map: Mapping[str, list[str]] | None = None
    component_source: bool = False  # treat seeds as component ids
    strict_rollups: bool = False  # raise on modules owned by two rollups


@dataclass(frozen=True)
class LoaderConfig:
    """Where module and component metadata live under a repository root."""
    root: Path
    module_map_path: str = "src/loader/js/yui3.json"
    component_glob: str = "src/*/build.json"

    @property
    def module_map_file(self) -> Path:
        return self.root / self.module_map_path

    @property
    def component_pattern(self) -> str:
        return str(self.root / self.component_glob)
