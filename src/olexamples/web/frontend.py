"""Static file serving for a built example site."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

router = APIRouter()


def _resolve_site_file(site_dir: Path, path: str) -> Path:
    """Map a request path onto a file inside ``site_dir``."""
    if "\0" in path:
        raise HTTPException(status_code=400, detail="Invalid path: contains null byte")

    site = site_dir.resolve()
    target = (site / path).resolve()
    if target != site and site not in target.parents:
        raise HTTPException(status_code=404, detail=f"File not found: {path}")

    if target.is_dir():
        target = target / "index.html"
    if not target.is_file():
        raise HTTPException(status_code=404, detail=f"File not found: {path}")
    return target


@router.get("/{path:path}")
async def site_file(path: str, request: Request) -> FileResponse:
    config = request.app.state.config
    return FileResponse(_resolve_site_file(Path(config.dest_dir), path))
