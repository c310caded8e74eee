"""Loaders for module maps, component maps and the repository root."""

from __future__ import annotations

from depcalc.loader.component_map import generate_component_map
from depcalc.loader.module_map import load_module_map
from depcalc.loader.root import ROOT_ENV_VARS, find_root
from depcalc.models import LoaderConfig, ResolverConfig


def load_resolver_config(
    loader: LoaderConfig,
    component_source: bool = False,
    strict_rollups: bool = False,
) -> ResolverConfig:
    """Read the module and component maps under ``loader.root``."""
    return ResolverConfig(
        module_map=load_module_map(loader.module_map_file),
        component_map=generate_component_map(loader.component_pattern),
        component_source=component_source,
        strict_rollups=strict_rollups,
    )


__all__ = [
    "ROOT_ENV_VARS",
    "find_root",
    "generate_component_map",
    "load_module_map",
    "load_resolver_config",
]
