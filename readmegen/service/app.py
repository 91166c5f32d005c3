"""FastAPI application entrypoint for readmegen service mode."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..orchestrator import Orchestrator


class AnalyzeRequest(BaseModel):
    path: str


class AnalyzeResponse(BaseModel):
    metadata: Dict[str, Any]


class RenderRequest(BaseModel):
    path: str
    style: Optional[str] = None
    update: bool = False


class RenderResponse(BaseModel):
    content: str
    style: Optional[str] = None
    custom_sections: int = 0


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing read-only readmegen operations."""

    app = FastAPI(title="readmegen service", version="1.0.0")

    def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze", response_model=AnalyzeResponse)
    def analyze(
        payload: AnalyzeRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> AnalyzeResponse:
        outcome = orchestrator.render_preview(payload.path)
        return AnalyzeResponse(metadata=outcome.metadata.to_dict())

    @app.post("/render", response_model=RenderResponse)
    def render(
        payload: RenderRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> RenderResponse:
        outcome = orchestrator.render_preview(
            payload.path, style=payload.style, update=payload.update
        )
        return RenderResponse(
            content=outcome.content,
            style=outcome.style,
            custom_sections=outcome.custom_sections,
        )

    @app.exception_handler(FileNotFoundError)
    def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
