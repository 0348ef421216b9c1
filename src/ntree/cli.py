"""Command-line entry point: ``ntree [directory_path]``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from ntree.models import NtreeError
from ntree.tree_renderer import render_tree

_LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


class UsageError(NtreeError):
    """Raised for an invalid command-line invocation."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(f"{self.format_usage().strip()}\n{self.prog}: {message}")


def _build_parser(prog: str) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        description="Print the contents of a directory as a tree.",
        add_help=False,
    )
    parser.add_argument(
        "directory_path",
        nargs="?",
        default=".",
        help="Directory to print (default: current directory)",
    )
    return parser


def parse_root(argv: list[str] | None = None, prog: str = "ntree") -> str:
    """Return the root directory named on the command line, ``"."`` if none.

    Every argument is taken as a path, including ones starting with ``-``.

    Raises:
        UsageError: more than one argument was given.
    """
    if argv is None:
        argv = sys.argv[1:]
    args = _build_parser(prog).parse_args(["--", *argv])
    return args.directory_path


def _tolerate_undecodable(stream: TextIO) -> None:
    # Names the filesystem could not decode are written back as their raw bytes
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def configure_logging() -> None:
    _tolerate_undecodable(sys.stderr)
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    """Run ntree. Returns 0 on completion and 1 on a usage error."""
    try:
        root = parse_root(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    configure_logging()
    _tolerate_undecodable(sys.stdout)
    render_tree(root, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
