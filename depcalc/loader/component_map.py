"""Build a component map from per-component build descriptors."""

from __future__ import annotations

import glob
import json
import logging
from pathlib import Path

from depcalc.errors import ModuleMapError


logger = logging.getLogger(__name__)


def generate_component_map(pattern: str) -> dict[str, list[str]]:
    """Glob build descriptors and map each component name to its sorted modules.

    Each descriptor looks like ``{"name": "widget", "builds": {"widget-base": {...}}}``.
    Descriptors sharing a name are merged.
    """
    components: dict[str, list[str]] = {}

    for build_path in sorted(glob.glob(pattern)):
        meta = _read_descriptor(Path(build_path))
        name = meta.get("name")
        builds = meta.get("builds") or {}
        if not isinstance(name, str) or not isinstance(builds, dict):
            logger.warning("Skipping %s: missing 'name' or 'builds'", build_path)
            continue
        modules = components.setdefault(name, [])
        for module_id in builds:
            if module_id not in modules:
                modules.append(module_id)

    for modules in components.values():
        modules.sort()

    logger.debug("Loaded %d components from %s", len(components), pattern)
    return components


def _read_descriptor(path: Path) -> dict:
    try:
        meta = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ModuleMapError(f"Cannot read build descriptor {path}: {e}")
    if not isinstance(meta, dict):
        raise ModuleMapError(f"Build descriptor {path} must be an object")
    return meta
