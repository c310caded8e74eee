"""Render a DependencyTree as an ASCII tree."""

from __future__ import annotations

from depcalc.models import DependencyTree

_COMPONENT_INDENT = "           "
_MODULE_INDENT = "      |    "


def _opening(index: int) -> str:
    return "┌" if index == 0 else "├"


def _closing(index: int, total: int) -> str:
    return "└" if index + 1 == total else "├"


def format_tree(tree: DependencyTree) -> str:
    """Upstream grows upwards from the sources, downstream hangs below them."""
    up = tree.upstream
    down = tree.downstream
    lines: list[str] = [""]

    for i, name in enumerate(up.components):
        lines.append(f"{_COMPONENT_INDENT}{_opening(i)}─ {name}")
    lines.append(f"      ┌─── Components ({len(up.components)})")
    lines.extend(["      |"] * 2)

    for i, name in enumerate(up.modules):
        lines.append(f"{_MODULE_INDENT}{_opening(i)}─ {name}")
    lines.append(f"      ├─── Modules ({len(up.modules)})")
    lines.extend(["      |"] * 2)

    lines.append(" ┌─── Upstream")
    lines.extend([" |"] * 3)
    lines.append(f" ├─ Source(s): {', '.join(sorted(tree.source))}")
    lines.extend([" |"] * 3)
    lines.append(" └─── Downstream")
    lines.extend(["      |"] * 2)

    lines.append(f"      ├─── Modules ({len(down.modules)})")
    for i, name in enumerate(down.modules):
        lines.append(f"{_MODULE_INDENT}{_closing(i, len(down.modules))}─ {name}")
    lines.extend(["      |"] * 2)

    lines.append(f"      └─── Components ({len(down.components)})")
    for i, name in enumerate(down.components):
        lines.append(f"{_COMPONENT_INDENT}{_closing(i, len(down.components))}─ {name}")

    lines.append("")
    return "\n".join(lines)
