"""Resolver — upstream/downstream modules and components for a set of source modules."""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable

from depcalc.analysis import ComponentIndex, DependencyWalker, GraphIndex
from depcalc.errors import InvalidArgumentError
from depcalc.models import DependencySet, DependencyTree, ResolverConfig


logger = logging.getLogger(__name__)


class Resolver:
    """Calculate the dependency tree for one or more modules.

    Usage::

        resolver = Resolver(ResolverConfig(
            module_map={"a": {"requires": ["b"]}, "b": {}},
            component_map={"x": ["a"], "y": ["b"]},
        ))
        tree = resolver.resolve("a")
        tree.upstream.modules     # ["a", "b"]
        tree.downstream.modules   # ["a"]

    The indexes are built once here and never mutated, so one Resolver can
    serve concurrent resolve() calls.
    """

    def __init__(self, config: ResolverConfig | None = None, **options):
        if config is None:
            config = ResolverConfig(**options)
        elif options:
            config = dataclasses.replace(config, **options)
        self.config = config
        self.graph = GraphIndex(self.config.module_map, strict_rollups=self.config.strict_rollups)
        self.walker = DependencyWalker(self.graph)
        self.components = ComponentIndex(self.config.component_map)

    def resolve(self, modules: str | Iterable[str] | None = None) -> DependencyTree:
        """Resolve a single module id or a sequence of them."""
        if not modules:
            raise InvalidArgumentError("No modules specified")

        if isinstance(modules, str):
            sources = [modules]
        else:
            sources = list(modules)
            if not sources:
                raise InvalidArgumentError("No modules specified")

        if self.config.component_source:
            sources = self._expand_components(sources)

        tree = DependencyTree(source=sources)
        tree.upstream = self._dependents(sources, upstream=True)
        tree.downstream = self._dependents(sources, upstream=False)
        return tree

    def _expand_components(self, components: list[str]) -> list[str]:
        modules: list[str] = []
        for component in components:
            members = self.components.modules_of(component)
            if not members:
                logger.debug("Component %s has no modules", component)
            modules.extend(members)
        return modules

    def _dependents(self, sources: list[str], upstream: bool) -> DependencySet:
        found: set[str] = set()
        for module_id in sources:
            found |= self.walker.walk(module_id, upstream=upstream)

        result = DependencySet(modules=sorted(found))
        if self.config.component_map is not None:
            result.components = self.components.lookup(result.modules)
        return result
