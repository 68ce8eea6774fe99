"""FastAPI application previewing a built example site."""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from olexamples import __version__
from olexamples.config import BuildConfig
from olexamples.errors import BuildError
from olexamples.index.builder import load_index
from olexamples.pipeline import BuildStats, build
from olexamples.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="olexamples preview", version=__version__)
app.state.config = BuildConfig()

# Held for the whole of a build so overlapping rebuilds run one after another.
_BUILD_LOCK = threading.Lock()


class RebuildPayload(BaseModel):
    src: str | None = None
    dest: str | None = None


def configure(config: BuildConfig) -> None:
    """Point the app at the sources and output of ``config``."""
    app.state.config = config


def _run_build(config: BuildConfig) -> BuildStats:
    with _BUILD_LOCK:
        return build(config)


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/api/examples")
async def list_examples() -> dict[str, Any]:
    """Return the example list and word index of the built site."""
    config: BuildConfig = app.state.config
    index_path = Path(config.dest_dir) / config.index_filename
    if not index_path.is_file():
        raise HTTPException(
            status_code=404,
            detail=f"Index not found at {index_path}. Build the examples first.",
        )
    return load_index(index_path.read_text(encoding="utf-8"))


@app.post("/api/rebuild")
async def rebuild(payload: RebuildPayload | None = None) -> dict[str, Any]:
    config: BuildConfig = app.state.config
    if payload is not None:
        config = replace(
            config,
            src_dir=Path(payload.src) if payload.src else config.src_dir,
            dest_dir=Path(payload.dest) if payload.dest else config.dest_dir,
        )

    try:
        stats = await asyncio.to_thread(_run_build, config)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except BuildError as exc:
        LOGGER.exception("Building examples failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return {"status": "ok", "dest": str(config.dest_dir), "stats": asdict(stats)}


# Registered last so the catch-all path does not shadow the API routes.
app.include_router(frontend_router)
