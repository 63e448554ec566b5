"""FastAPI application exposing term-sheet extraction."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, File, HTTPException, Query, Request, UploadFile

from .config import AppConfig, load_config
from .layout import PdfExtractionError
from .logging import configure_logging, get_logger
from .pipeline import parse_term_sheet

logger = get_logger(__name__)

PDF_CONTENT_TYPES = {"application/pdf", "application/x-pdf"}


def get_config(request: Request) -> AppConfig:
    config: AppConfig = request.app.state.config
    return config


def _is_pdf(upload: UploadFile) -> bool:
    if upload.content_type in PDF_CONTENT_TYPES:
        return True
    return (upload.filename or "").lower().endswith(".pdf")


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or load_config()
    configure_logging(config.log_level, json_output=config.log_json)

    api = FastAPI(title="Term Sheet Extraction Service", version="1.0.0")
    api.state.config = config

    @api.get("/health")
    def health(config: AppConfig = Depends(get_config)) -> dict:
        return {
            "status": "healthy",
            "max_pdf_mb": config.max_pdf_megabytes,
        }

    @api.post("/parse")
    def parse(
        file: UploadFile = File(..., description="Term-sheet PDF"),
        raw: bool = Query(False, description="Return values without display formatting"),
        config: AppConfig = Depends(get_config),
    ) -> dict:
        """Extract metadata and part assignments from an uploaded term sheet."""
        if not _is_pdf(file):
            raise HTTPException(status_code=400, detail="Only PDF files are accepted")

        data = file.file.read()
        try:
            result = parse_term_sheet(data, config=config)
        except PdfExtractionError as exc:
            logger.error("parse_failed", filename=file.filename, error=str(exc))
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        payload = result.to_dict(display=not raw)
        payload["filename"] = file.filename
        return payload

    return api


app = create_app()
