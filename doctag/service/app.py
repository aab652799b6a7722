"""FastAPI application exposing the comment processor over HTTP."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import DocTagConfig
from ..errors import DocTagError
from ..processor import DocCommentProcessor
from ..registry import build_registry


class ParseRequest(BaseModel):
    text: str
    file: Optional[str] = None
    line: int = 1


class DiagnosticModel(BaseModel):
    kind: str
    message: str
    pattern: Optional[str] = None
    position: Optional[int] = None
    file: Optional[str] = None
    line: Optional[int] = None


class ParseResponse(BaseModel):
    metadata: Dict[str, Any]
    diagnostics: List[DiagnosticModel]
    doc: str


class TagInfo(BaseModel):
    pattern: str
    key: str
    fields: List[str]


class HealthResponse(BaseModel):
    status: str


def _default_processor() -> DocCommentProcessor:
    return DocCommentProcessor(build_registry())


def create_app(
    processor_factory: Callable[[], DocCommentProcessor] = _default_processor,
) -> FastAPI:
    """Create the FastAPI application exposing doctag parsing."""

    app = FastAPI(title="DocTag Service", version="1.0.0")
    # The registry is frozen and read-only, so one processor serves every request.
    processor = processor_factory()

    async def get_processor() -> DocCommentProcessor:
        return processor

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/tags", response_model=List[TagInfo])
    async def list_tags(
        processor: DocCommentProcessor = Depends(get_processor),
    ) -> List[TagInfo]:
        return [
            TagInfo(pattern=definition.pattern, key=definition.key, fields=list(definition.fields))
            for definition in processor.registry.definitions()
        ]

    @app.post("/parse", response_model=ParseResponse)
    async def parse_comment(
        payload: ParseRequest,
        processor: DocCommentProcessor = Depends(get_processor),
    ) -> ParseResponse:
        result = processor.process_text(payload.text, file=payload.file, line=payload.line)
        return ParseResponse(
            metadata=result.metadata,
            diagnostics=[DiagnosticModel(**diagnostic.to_dict()) for diagnostic in result.diagnostics],
            doc=result.doc,
        )

    @app.exception_handler(DocTagError)
    async def doctag_error_handler(
        _: Any, exc: DocTagError
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000, config: DocTagConfig | None = None
) -> None:  # pragma: no cover - integration path
    try:
        import uvicorn
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install doctag[service]`."
        ) from exc

    def _factory() -> DocCommentProcessor:
        if config is None:
            return _default_processor()
        return DocCommentProcessor(
            build_registry(config.tags), ignore_unknown=config.diagnostics.ignore
        )

    uvicorn.run(create_app(_factory), host=host, port=port)
