"""FastAPI application entrypoint for appdocs service mode."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Dict, Literal, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from ..config import AppDocsConfig, ConfigError, load_config
from ..logging import get_logger
from ..pipeline import Pipeline, UnknownDocumentKindError, analyze_components, analyze_stores, analyze_types

logger = get_logger("service")

_ANALYSES: Dict[str, Callable[[str], Dict[str, Any]]] = {
    "components": analyze_components,
    "stores": analyze_stores,
    "types": analyze_types,
}


class AnalyzeRequest(BaseModel):
    path: str
    kind: Literal["components", "stores", "types"]


class RenderRequest(BaseModel):
    project: str
    kind: str = "all"
    name: Optional[str] = None
    lang: Optional[Literal["fr", "en"]] = None


class HealthResponse(BaseModel):
    status: str


PipelineFactory = Callable[[AppDocsConfig, Optional[str]], Pipeline]


def _default_pipeline(config: AppDocsConfig, language: Optional[str]) -> Pipeline:
    return Pipeline(config, language=language, echo=logger.info)


def create_app(pipeline_factory: PipelineFactory = _default_pipeline) -> FastAPI:
    """Create the FastAPI application exposing analysis and HTML generation."""

    app = FastAPI(title="AppDocs Service", version="1.0.0")

    async def get_factory() -> PipelineFactory:
        return pipeline_factory

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/analyze")
    async def analyze(payload: AnalyzeRequest) -> Dict[str, Any]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, _ANALYSES[payload.kind], payload.path)

    @app.post("/render/html", response_class=HTMLResponse)
    async def render_html(
        payload: RenderRequest,
        factory: PipelineFactory = Depends(get_factory),
    ) -> HTMLResponse:
        def _render() -> str:
            project = Path(payload.project).expanduser()
            if not project.is_dir():
                raise FileNotFoundError(f"Project path not found: {payload.project}")
            config = load_config(project)
            if payload.name:
                config.project_name = payload.name
            return factory(config, payload.lang).render_html(payload.kind)

        loop = asyncio.get_running_loop()
        html = await loop.run_in_executor(None, _render)
        return HTMLResponse(content=html)

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotADirectoryError)
    async def not_a_directory_handler(_: Any, exc: NotADirectoryError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(UnknownDocumentKindError)
    async def unknown_kind_handler(_: Any, exc: UnknownDocumentKindError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)


__all__ = ["AnalyzeRequest", "RenderRequest", "create_app", "run_service"]
