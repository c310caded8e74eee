"""Module graph index — definitions, rollup owners, reverse edges and condition triggers."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from depcalc.errors import AmbiguousRollupOwnerError
from depcalc.models import ModuleDefinition


logger = logging.getLogger(__name__)


class GraphIndex:
    """Read-only view of a module map plus the lookup tables derived from it."""

    def __init__(self, module_map: Mapping[str, Any], strict_rollups: bool = False):
        self._modules: dict[str, ModuleDefinition] = {}
        for module_id, entry in (module_map or {}).items():
            if not isinstance(entry, ModuleDefinition):
                entry = ModuleDefinition.from_dict(entry, module_id)
            self._modules[module_id] = entry

        self.rollups: dict[str, str] = {}  # module -> owning rollup
        self.reverse: dict[str, list[str]] = {}  # dependency -> [dependents]
        self.triggered: dict[str, list[str]] = {}  # trigger -> [conditional modules]
        self.triggers: dict[str, list[str]] = {}  # conditional module -> [triggers]

        owners: dict[str, list[str]] = {}
        for module_id, definition in self._modules.items():
            # Step 1: rollup owners; the last rollup seen wins
            for child in definition.use:
                owners.setdefault(child, []).append(module_id)
                self.rollups[child] = module_id

            # Step 2: reverse requires/optional edges
            for dep in definition.dependencies:
                dependents = self.reverse.setdefault(dep, [])
                if module_id not in dependents:
                    dependents.append(module_id)

            # Step 3: conditional loading, in both directions
            if definition.condition:
                cond = definition.condition
                self.triggered.setdefault(cond.trigger, []).append(cond.name)
                self.triggers.setdefault(cond.name, []).append(cond.trigger)

        for child, rollup_ids in owners.items():
            distinct = list(dict.fromkeys(rollup_ids))
            if len(distinct) < 2:
                continue
            if strict_rollups:
                raise AmbiguousRollupOwnerError(child, distinct)
            logger.warning(
                "Module %s is used by rollups %s; using %s",
                child, ", ".join(distinct), self.rollups[child],
            )

        logger.debug(
            "Indexed %d modules (%d rolled up, %d conditional)",
            len(self._modules), len(self.rollups), len(self.triggers),
        )

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._modules

    def __len__(self) -> int:
        return len(self._modules)

    def get(self, module_id: str) -> ModuleDefinition | None:
        """Definition for ``module_id``, or None when it is not in the map."""
        return self._modules.get(module_id)

    def rollup_owner(self, module_id: str) -> str | None:
        return self.rollups.get(module_id)

    def dependents(self, module_id: str) -> list[str]:
        """Modules listing ``module_id`` in their requires or optional."""
        return list(self.reverse.get(module_id, ()))

    def conditional_modules(self, trigger: str) -> list[str]:
        return self.triggered.get(trigger, [])

    def condition_triggers(self, module_id: str) -> list[str]:
        return self.triggers.get(module_id, [])
