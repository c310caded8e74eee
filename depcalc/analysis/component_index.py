"""Component index — maps modules back to the components that ship them."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence


class ComponentIndex:
    """Resolve module ids to the components containing any of them."""

    def __init__(self, component_map: Mapping[str, Sequence[str]] | None = None):
        self.components: dict[str, list[str]] = {
            name: list(modules) for name, modules in (component_map or {}).items()
        }
        self.membership: dict[str, set[str]] = {}  # module -> {components}
        for name, modules in self.components.items():
            for module_id in modules:
                self.membership.setdefault(module_id, set()).add(name)

    def __bool__(self) -> bool:
        return bool(self.components)

    def modules_of(self, component: str) -> list[str]:
        """Modules of ``component``; empty when it is unknown."""
        return list(self.components.get(component, []))

    def lookup(self, modules: Iterable[str]) -> list[str]:
        """Sorted components containing at least one of ``modules``."""
        found: set[str] = set()
        for module_id in modules:
            found.update(self.membership.get(module_id, ()))
        return sorted(found)
