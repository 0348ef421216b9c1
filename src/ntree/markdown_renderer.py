"""Markdown output assembly."""

from __future__ import annotations

from typing import Iterable


def render_markdown(root: str, lines: Iterable[str]) -> str:
    """Render a directory tree as a single Markdown document.

    Args:
        root: the root path, printed as the first line of the tree
        lines: tree lines as produced by ``iter_tree_lines``
    """
    parts: list[str] = []

    parts.append(f"# Directory: {root}\n")

    parts.append("## File Structure\n")
    parts.append("```")
    parts.append(root)
    parts.extend(lines)
    parts.append("```\n")

    return "\n".join(parts)
