"""Reporter layer."""

from __future__ import annotations

from typing import Callable

from depcalc.models import DependencyTree
from depcalc.reporter.json_formatter import format_json
from depcalc.reporter.tree_formatter import format_tree


Writer = Callable[[str], None]


def report(tree: DependencyTree, writer: Writer, as_json: bool = False) -> None:
    """Render ``tree`` and pass the text to ``writer``."""
    writer(format_json(tree) if as_json else format_tree(tree))


__all__ = ["Writer", "format_json", "format_tree", "report"]
