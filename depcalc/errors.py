"""Exceptions raised by depcalc."""

from __future__ import annotations


class DepcalcError(Exception):
    """Base class for all depcalc errors."""


class InvalidArgumentError(DepcalcError, ValueError):
    """resolve() was called without any source modules."""


class ConfigurationMissingError(DepcalcError):
    """No module map root could be located."""


class ModuleMapError(DepcalcError):
    """A module map or component descriptor document is malformed."""


class AmbiguousRollupOwnerError(DepcalcError):
    """A module is listed in the ``use`` of more than one rollup."""

    def __init__(self, module_id: str, owners: list[str]):
        self.module_id = module_id
        self.owners = owners
        super().__init__(
            f"Module {module_id!r} is used by more than one rollup: {', '.join(owners)}"
        )
