"""Fixtures for FastAPI adapter unit tests."""

from pathlib import Path

import pytest
from fastapi import FastAPI, Request


@pytest.fixture
def echo_app() -> FastAPI:
    """FastAPI app whose handlers report the path they were routed with."""
    app = FastAPI()

    @app.get("/hello/world")
    def hello_world(request: Request) -> dict:
        return {
            "route": "hello_world",
            "path": request.url.path,
            "original": request.headers.get("x-original-uri"),
            "query": request.url.query,
        }

    @app.get("/strasse")
    def strasse(request: Request) -> dict:
        return {"route": "strasse", "path": request.url.path}

    @app.get("/scripts/MyScript.bat")
    def script(request: Request) -> dict:
        return {"route": "script", "path": request.url.path}

    @app.get("/{rest:path}")
    def fallback(rest: str, request: Request) -> dict:
        return {"route": "fallback", "path": request.url.path}

    return app


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Directory tree for fs mode: scripts/MyScript.bat."""
    (tmp_path / "scripts").mkdir()
    (tmp_path / "scripts" / "MyScript.bat").write_text("echo test")
    return tmp_path
