# src/task_tracker/server/dev_server.py

"""
Static file development server for the browser app.

Routing mirrors a classic SPA dev setup:
- files under public_dir are served at "/"
- files under source_dir are served at "/src/..."
- anything else gets public_dir/index.html
"""

from __future__ import annotations

import contextlib
import logging
import socket
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"
SOURCE_PREFIX = "src/"


def _safe_file(root: Path, rel_path: str) -> Path | None:
    """Resolve rel_path inside root; None if missing or outside root."""
    try:
        base = root.resolve()
        target = (base / rel_path).resolve()
    except (OSError, RuntimeError):
        return None

    if not target.is_relative_to(base):
        logger.warning("Refusing path outside %s: %s", base, rel_path)
        return None

    if target.is_dir():
        target = target / INDEX_FILE
    return target if target.is_file() else None


def create_app(public_dir: str | Path, source_dir: str | Path | None = None) -> FastAPI:
    """Build the dev server app for the given asset directories."""
    public_root = Path(public_dir)
    source_root = Path(source_dir) if source_dir is not None else None

    app = FastAPI(
        title="Task Tracker dev server",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"])
    def serve(full_path: str) -> FileResponse:
        found = _safe_file(public_root, full_path)

        if found is None and source_root is not None and full_path.startswith(SOURCE_PREFIX):
            found = _safe_file(source_root, full_path[len(SOURCE_PREFIX):])

        if found is None:
            found = _safe_file(public_root, INDEX_FILE)

        if found is None:
            raise HTTPException(status_code=404, detail="Not Found")

        return FileResponse(found)

    logger.debug("Dev server app created public=%s source=%s", public_root, source_root)
    return app


def local_ip() -> str:
    """
    Best-effort LAN IPv4 of this machine (for "open on your phone" hints).

    Connecting a UDP socket sends no packets; it only makes the OS pick the
    outbound interface.
    """
    with contextlib.suppress(OSError):
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.connect(("10.255.255.255", 1))
            ip = s.getsockname()[0]
            if ip and not ip.startswith("127."):
                return ip
    return "localhost"
