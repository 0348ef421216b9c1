"""``ntree-ui [directory_path]``: serve the Streamlit page for one directory."""

from __future__ import annotations

import logging
import os
import sys
import threading
import time
import webbrowser
from urllib.parse import urlencode

import requests

from ntree.cli import UsageError, configure_logging, parse_root

logger = logging.getLogger(__name__)

PORT = 8501

_APP_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "app.py")


def app_url(root: str, port: int = PORT) -> str:
    """URL of the page with *root* pre-filled through the ``path`` query parameter."""
    return f"http://localhost:{port}/?{urlencode({'path': root})}"


def wait_until_ready(url: str, attempts: int = 30, delay: float = 1.0) -> bool:
    """Poll *url* until it answers 200. Returns False if it never does."""
    for _ in range(attempts):
        try:
            if requests.get(url, timeout=2).status_code == 200:
                return True
        except requests.RequestException as exc:
            logger.debug("ntree UI not up yet: %s", exc)
        time.sleep(delay)
    return False


def _open_when_ready(url: str) -> None:
    if wait_until_ready(url):
        webbrowser.open(url)
    else:
        logger.warning("Streamlit server did not answer at %s", url)


def main(argv: list[str] | None = None) -> int:
    try:
        root = parse_root(argv, prog="ntree-ui")
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    configure_logging()
    url = app_url(os.path.abspath(root))
    threading.Thread(target=_open_when_ready, args=(url,), daemon=True).start()

    from streamlit.web import bootstrap

    bootstrap.run(
        _APP_PATH,
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": PORT,
            "browser.gatherUsageStats": False,
        },
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
