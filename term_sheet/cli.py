"""Command-line interface for the term-sheet extractor."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from .config import AppConfig, load_config
from .layout import PdfExtractionError
from .logging import configure_logging, get_logger
from .models import TermSheetResult
from .pipeline import parse_term_sheet, parse_term_text

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Court term-sheet extractor")


def _bootstrap() -> AppConfig:
    try:
        config = load_config()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(config.log_level, json_output=config.log_json)
    return config


def _echo_result(result: TermSheetResult, raw: bool) -> None:
    typer.echo(json.dumps(result.to_dict(display=not raw), ensure_ascii=False, indent=2))


@app.command("parse")
def parse_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Term-sheet PDF"),
    raw: bool = typer.Option(False, "--raw", help="Print extracted values without display formatting"),
) -> None:
    config = _bootstrap()
    try:
        result = parse_term_sheet(path.read_bytes(), config=config)
    except PdfExtractionError as exc:
        logger.error("parse_failed", path=str(path), error=str(exc))
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    _echo_result(result, raw)


@app.command("text")
def text_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Reconstructed text file"),
    raw: bool = typer.Option(False, "--raw", help="Print extracted values without display formatting"),
) -> None:
    _bootstrap()
    result = parse_term_text(path.read_text(encoding="utf-8"))
    _echo_result(result, raw)


@app.command("service")
def service_command(
    host: Optional[str] = typer.Option(None, "--host", help="Service bind host"),
    port: Optional[int] = typer.Option(None, "--port", help="Service port"),
) -> None:
    import uvicorn

    config = _bootstrap()
    uvicorn.run(
        "term_sheet.app:create_app",
        host=host or config.service_host,
        port=port or config.service_port,
        factory=True,
        log_level=config.log_level.lower(),
    )


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
