"""Streamlit UI for ntree."""

from __future__ import annotations

import logging
import os
import threading

import streamlit as st

from ntree.markdown_renderer import render_markdown
from ntree.tree_renderer import iter_tree_lines

_PREVIEW_MAX_LINES = 1000


class _CollectingHandler(logging.Handler):
    """Keeps the warnings logged by one thread.

    Streamlit serves each browser session from its own thread, so records
    from other threads belong to other renders and are ignored.
    """

    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.thread_id = threading.get_ident()
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        if record.thread == self.thread_id:
            self.messages.append(_displayable(self.format(record)))


def _displayable(text: str) -> str:
    # Undecodable filename bytes arrive as lone surrogates
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def collect_tree(root: str) -> tuple[list[str], list[str]]:
    """Build the tree below *root*, returning ``(lines, diagnostics)``."""
    handler = _CollectingHandler()
    ntree_logger = logging.getLogger("ntree")
    ntree_logger.addHandler(handler)
    try:
        lines = [_displayable(line) for line in iter_tree_lines(root)]
    finally:
        ntree_logger.removeHandler(handler)
    return lines, handler.messages


def main() -> None:
    st.set_page_config(
        page_title="ntree",
        page_icon="🌳",
        layout="wide",
    )

    st.title("ntree")
    st.caption("Show the contents of a local directory as a tree.")

    root = st.text_input(
        "Directory path",
        value=_qp("path", "."),
        placeholder="/path/to/directory",
    ).strip()

    if st.button("Render", type="primary", use_container_width=True):
        if not root:
            st.error("Please enter a directory path.")
        elif not os.path.isdir(root):
            st.error(f"Not a directory: {root}")
        else:
            with st.spinner(f"Reading {root} ..."):
                lines, errors = collect_tree(root)
            st.session_state["tree"] = {"root": root, "lines": lines, "errors": errors}

    # The last tree stays visible across reruns, e.g. after a download
    if "tree" in st.session_state:
        _show_tree(**st.session_state["tree"])


def _show_tree(root: str, lines: list[str], errors: list[str]) -> None:
    entries_col, errors_col = st.columns(2)
    entries_col.metric("Entries", f"{len(lines):,}")
    errors_col.metric("Diagnostics", len(errors))

    shown = lines[:_PREVIEW_MAX_LINES]
    st.code("\n".join([root, *shown]), language=None)
    if len(lines) > len(shown):
        st.caption(
            f"Showing the first {len(shown):,} of {len(lines):,} entries; "
            "the Markdown download has all of them."
        )

    if errors:
        with st.expander("Diagnostics"):
            st.code("\n".join(errors), language=None)

    name = os.path.basename(os.path.abspath(root)) or "root"
    st.download_button(
        "Download Markdown",
        data=render_markdown(root, lines),
        file_name=f"{name}_tree.md",
        mime="text/markdown",
    )


if __name__ == "__main__":
    main()
