"""Load a module map document from disk."""

from __future__ import annotations

import json
from pathlib import Path

from depcalc.errors import ModuleMapError
from depcalc.models import ModuleDefinition, parse_module_map


def load_module_map(path: Path) -> dict[str, ModuleDefinition]:
    """Read and parse a JSON module map."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ModuleMapError(f"Module map not found: {path}")
    except json.JSONDecodeError as e:
        raise ModuleMapError(f"Invalid JSON in {path}: {e}")
    return parse_module_map(raw)
