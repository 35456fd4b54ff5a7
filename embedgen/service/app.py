"""FastAPI application entrypoint for embedgen service mode."""

from __future__ import annotations

import base64
import binascii
from typing import Callable, List, Literal, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ..generator import HeaderGenerator
from ..logging import get_logger
from ..models import Artifact, Content
from ..options import Options, resolve_options

logger = get_logger("service")


class RenderOptions(BaseModel):
    language: Optional[Literal["c", "c++"]] = None
    top_level_namespace: Optional[str] = None
    top_level_namespace_style: Optional[Literal["legacy", "c++17"]] = None
    constexpr: Optional[bool] = None
    prepend: List[str] = Field(default_factory=list)
    include: List[str] = Field(default_factory=list)
    data_type: Optional[str] = None
    length_type: Optional[str] = None
    header_extension: Optional[str] = None


class RenderRequest(BaseModel):
    name: str
    content: Optional[str] = None
    content_base64: Optional[str] = None
    options: RenderOptions = Field(default_factory=RenderOptions)


class RenderResponse(BaseModel):
    status: str
    name: Optional[str] = None
    text: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_resolver(payload: RenderOptions) -> Options:
    return resolve_options(payload.model_dump(exclude_none=True))


def create_app(
    options_resolver: Callable[[RenderOptions], Options] = _default_resolver,
) -> FastAPI:
    """Create the FastAPI application exposing header rendering."""

    app = FastAPI(title="embedgen Service", version="1.0.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/render", response_model=RenderResponse)
    async def render(payload: RenderRequest) -> RenderResponse:
        content = _decode_content(payload)
        generator = HeaderGenerator(options_resolver(payload.options))
        header = generator.render(Artifact(name=payload.name, content=content))
        if header is None:
            return RenderResponse(status="filtered")
        return RenderResponse(status="ok", name=header.name, text=header.text)

    return app


def _decode_content(payload: RenderRequest) -> Content:
    if payload.content_base64 is not None:
        try:
            return base64.b64decode(payload.content_base64, validate=True)
        except (binascii.Error, ValueError) as exc:
            logger.debug("Rejected base64 payload for %s: %s", payload.name, exc)
            raise HTTPException(status_code=400, detail="content_base64 is not valid base64") from exc
    return payload.content or ""


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    try:
        import uvicorn
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install uvicorn`."
        ) from exc

    app = create_app()
    uvicorn.run(app, host=host, port=port)
