"""Render a DependencyTree as JSON."""

from __future__ import annotations

import json

from depcalc.models import DependencyTree


def format_json(tree: DependencyTree, indent: int = 4) -> str:
    return json.dumps(tree.to_dict(), indent=indent)
