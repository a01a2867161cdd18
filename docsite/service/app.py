"""FastAPI application entrypoint for docsite service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..orchestrator import BuildOutcome, Orchestrator


class BuildRequest(BaseModel):
    path: str
    manifest: Optional[str] = None
    output_dir: Optional[str] = None
    dry_run: bool = False


class BuildResponse(BaseModel):
    status: str
    output_dir: str
    files: List[str]
    dry_run: bool


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing docsite builds."""

    app = FastAPI(title="docsite service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        # One orchestrator per request keeps builds independent.
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/build", response_model=BuildResponse)
    async def build_site(
        payload: BuildRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> BuildResponse:
        def _run_build() -> BuildOutcome:
            return orchestrator.run_build(
                payload.path,
                manifest=payload.manifest,
                output_dir=payload.output_dir,
                dry_run=payload.dry_run,
            )

        loop = asyncio.get_running_loop()
        outcome = await loop.run_in_executor(None, _run_build)
        return BuildResponse(
            status="ok",
            output_dir=str(outcome.output_dir),
            files=[str(path) for path in outcome.paths],
            dry_run=outcome.dry_run,
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(
        _: Any, exc: FileNotFoundError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(
        _: Any, exc: RuntimeError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    app = create_app()
    uvicorn.run(app, host=host, port=port)
