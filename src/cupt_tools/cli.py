from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .config import CuptToolsConfig, load_config
from .errors import CuptError
from .pipeline import (
    BatchResult,
    clean_corpus,
    merge_files,
    summarize_corpus,
    validate_corpus,
)
from .stats import DocumentSummary

app = typer.Typer(help="Cupt (PARSEME MWE) corpus tools.", no_args_is_help=True)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@app.callback()
def configure(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...). Overrides config log_level.",
    ),
) -> None:
    """Cupt (PARSEME MWE) corpus tools."""
    ctx.obj = {"log_level": log_level}


@app.command()
def stats(
    ctx: typer.Context,
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Parse the input corpus and emit a JSON summary of tokens and MWEs."""
    cfg = _load_and_configure(ctx, config)
    try:
        result = summarize_corpus(input_path, cfg)
    except CuptError as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc
    typer.echo(json.dumps(_batch_payload(result), indent=2))


@app.command()
def validate(
    ctx: typer.Context,
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Check that every file parses and its MWE annotations are consistent."""
    cfg = _load_and_configure(ctx, config)
    result = validate_corpus(input_path, cfg)
    for failure in result.failures:
        typer.echo(f"{failure.doc_id}: {failure.message}", err=True)
    if not result.ok:
        raise typer.Exit(code=1)
    typer.echo(f"{len(result.processed)} file(s) valid.")


@app.command()
def clean(
    ctx: typer.Context,
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    output_path: Path = typer.Option(..., file_okay=False),
    keep: List[str] | None = typer.Option(
        None,
        "--keep",
        "-k",
        help="MWE type to keep (repeatable). Without any, all annotations are removed.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Remove MWE annotations except the kept types and write the cleaned files."""
    cfg = _load_and_configure(ctx, config)
    if keep:
        cfg.keep_types = list(keep)
    try:
        result = clean_corpus(input_path, output_path, cfg)
    except CuptError as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc
    for failure in result.failures:
        typer.echo(f"[error] {failure.doc_id}: {failure.message}", err=True)
    typer.echo(f"Wrote {len(result.processed)} cleaned file(s) to {output_path}")
    if not result.ok:
        raise typer.Exit(code=1)


@app.command()
def merge(
    ctx: typer.Context,
    primary: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    secondary: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_path: Path = typer.Option(..., dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Copy tokens missing from the secondary file over from the primary one."""
    cfg = _load_and_configure(ctx, config)
    try:
        merge_files(primary, secondary, output_path, cfg)
    except CuptError as exc:
        typer.echo(f"Cannot merge {primary} and {secondary}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote merged file to {output_path}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = CuptToolsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


class FailurePayload(TypedDict):
    doc_id: str
    message: str


class SummaryPayload(TypedDict):
    doc_id: str
    paragraphs: int
    sentences: int
    tokens: int
    chosen_tokens: int
    mwes: int
    mwe_types: dict[str, int]


class BatchPayload(TypedDict):
    documents: List[SummaryPayload]
    failures: List[FailurePayload]


def _load_and_configure(
    ctx: typer.Context, config_path: Path | None
) -> CuptToolsConfig:
    """Load the config and set up logging from --log-level or the config value."""
    cfg = load_config(config_path)
    override = (ctx.obj or {}).get("log_level")
    level_name = (override or cfg.log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level {level_name!r}", param_hint="--log-level"
        )
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return cfg


def _batch_payload(result: BatchResult) -> BatchPayload:
    return {
        "documents": [_summary_dict(summary) for summary in result.summaries],
        "failures": [
            {"doc_id": failure.doc_id, "message": failure.message}
            for failure in result.failures
        ],
    }


def _summary_dict(summary: DocumentSummary) -> SummaryPayload:
    return {
        "doc_id": summary.doc_id,
        "paragraphs": summary.num_paragraphs,
        "sentences": summary.num_sentences,
        "tokens": summary.num_tokens,
        "chosen_tokens": summary.num_chosen_tokens,
        "mwes": summary.num_mwes,
        "mwe_types": dict(summary.mwe_types),
    }


if __name__ == "__main__":
    main()
