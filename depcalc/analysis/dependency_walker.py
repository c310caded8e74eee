"""Dependency walker — transitive upstream/downstream modules for one source module."""

from __future__ import annotations

import logging

from depcalc.analysis.graph_index import GraphIndex


logger = logging.getLogger(__name__)


class DependencyWalker:
    """Walk a GraphIndex from a single module in one direction.

    Upstream follows ``requires``/``optional`` edges and pulls in modules
    whose condition is triggered by a visited module. Downstream follows the
    same edges in reverse, adds the trigger of any visited conditional
    module, and links a module to the rollup that uses it.

    Rollups are expanded into their ``use`` list in both directions but are
    never part of the result. Modules that are referenced but have no
    definition are reported as-is and not expanded.
    """

    def __init__(self, index: GraphIndex):
        self.index = index

    def walk(self, module_id: str, upstream: bool = True) -> set[str]:
        index = self.index
        found: set[str] = set()

        if module_id not in index:
            return found

        visited = {module_id}
        stack = [module_id]

        while stack:
            current = stack.pop()
            definition = index.get(current)
            if definition is None:
                # Dangling reference
                found.add(current)
                continue

            candidates: list[str] = []
            if upstream:
                candidates.extend(index.conditional_modules(current))
                candidates.extend(definition.dependencies)
            else:
                candidates.extend(t for t in index.condition_triggers(current) if t in index)
                candidates.extend(index.dependents(current))

            if definition.is_rollup:
                candidates.extend(definition.use)
            else:
                found.add(current)
                owner = index.rollup_owner(current)
                if not upstream and owner:
                    candidates.append(owner)

            for candidate in candidates:
                if candidate not in visited:
                    visited.add(candidate)
                    stack.append(candidate)

        logger.debug(
            "%s of %s: %d modules (%d visited)",
            "upstream" if upstream else "downstream", module_id, len(found), len(visited),
        )
        return found

    def upstream(self, module_id: str) -> set[str]:
        return self.walk(module_id, upstream=True)

    def downstream(self, module_id: str) -> set[str]:
        return self.walk(module_id, upstream=False)
