"""FastAPI application entrypoint for gitscribe service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, TypeVar

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..errors import GenerationError, ProcessError
from ..models import GitContext
from ..orchestrator import Orchestrator

T = TypeVar("T")


class CommitMessageRequest(BaseModel):
    status: str = ""
    diff: str = ""
    branch: str = ""
    log: str = ""
    template: str = ""


class CommitMessageResponse(BaseModel):
    message: str


class DiffRequest(BaseModel):
    diff: str
    template: str = ""


class BranchNameResponse(BaseModel):
    branch: str


class PRContentResponse(BaseModel):
    title: str
    description: str


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


async def _run_blocking(func: Callable[[], T]) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func)


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing gitscribe operations."""

    app = FastAPI(title="gitscribe", version=__version__)

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/commit-message", response_model=CommitMessageResponse)
    async def commit_message(
        payload: CommitMessageRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> CommitMessageResponse:
        context = GitContext(
            status=payload.status,
            diff=payload.diff,
            branch=payload.branch,
            log=payload.log,
        )
        message = await _run_blocking(
            lambda: orchestrator.generate_commit_message(context, payload.template)
        )
        return CommitMessageResponse(message=message)

    @app.post("/branch-name", response_model=BranchNameResponse)
    async def branch_name(
        payload: DiffRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> BranchNameResponse:
        branch = await _run_blocking(
            lambda: orchestrator.generate_branch_name(payload.diff, payload.template)
        )
        return BranchNameResponse(branch=branch)

    @app.post("/pr-content", response_model=PRContentResponse)
    async def pr_content(
        payload: DiffRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> PRContentResponse:
        content = await _run_blocking(
            lambda: orchestrator.generate_pr_content(payload.diff, payload.template)
        )
        return PRContentResponse(title=content.title, description=content.description)

    @app.exception_handler(ProcessError)
    async def process_error_handler(_: Any, exc: ProcessError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    @app.exception_handler(GenerationError)
    async def generation_error_handler(_: Any, exc: GenerationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(orchestrator_factory)
    uvicorn.run(app, host=host, port=port)
