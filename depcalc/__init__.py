"""depcalc: upstream and downstream dependency calculator for module maps."""

from depcalc.errors import (
    AmbiguousRollupOwnerError,
    ConfigurationMissingError,
    DepcalcError,
    InvalidArgumentError,
    ModuleMapError,
)
from depcalc.models import (
    Condition,
    DependencySet,
    DependencyTree,
    LoaderConfig,
    ModuleDefinition,
    ResolverConfig,
    parse_module_map,
)
from depcalc.resolver import Resolver

__version__ = "0.1.0"

__all__ = [
    "AmbiguousRollupOwnerError",
    "Condition",
    "ConfigurationMissingError",
    "DependencySet",
    "DependencyTree",
    "DepcalcError",
    "InvalidArgumentError",
    "LoaderConfig",
    "ModuleDefinition",
    "ModuleMapError",
    "Resolver",
    "ResolverConfig",
    "parse_module_map",
]
