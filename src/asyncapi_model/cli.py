"""CLI entry point for asyncapi-model."""

import logging
from pathlib import Path

import click

from asyncapi_model.config import CodecSettings
from asyncapi_model.errors import AsyncApiError
from asyncapi_model.model.document import AsyncAPI
from asyncapi_model.parser.detect import format_for_path
from asyncapi_model.parser.document import dump, load

logger = logging.getLogger(__name__)


def _load_doc(doc_path: Path) -> AsyncAPI:
    """Decode a document, turning decode errors into a CLI failure."""
    try:
        return load(doc_path)
    except AsyncApiError as e:
        raise click.ClickException(f"{doc_path} is not a valid AsyncAPI document: {e}") from e


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from ASYNCAPI_MODEL_LOG_LEVEL or WARNING).")
@click.pass_context
def main(ctx: click.Context, log_level: str | None):
    """asyncapi-model: read, check and rewrite AsyncAPI documents."""
    settings = CodecSettings()
    level = (log_level or settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = settings


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(doc_path: Path):
    """Decode a document and print a short summary."""
    document = _load_doc(doc_path)
    components = document.components
    messages = len(components.messages) if components else 0
    click.echo(
        f"{doc_path}: AsyncAPI {document.asyncapi} '{document.info.title}' "
        f"({len(document.channels)} channels, {len(document.servers)} servers, {messages} messages)"
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(dir_okay=False, path_type=Path), help="Output file path.")
@click.option("--format", "fmt", default=None, type=click.Choice(["yaml", "json"]), help="Output format (default: from the output suffix).")
@click.option("--indent", default=None, type=click.IntRange(min=0), help="Indentation width.")
@click.pass_obj
def convert(settings: CodecSettings, doc_path: Path, output: Path, fmt: str | None, indent: int | None):
    """Decode a document and write it back out in normalised form."""
    document = _load_doc(doc_path)

    if fmt is None:
        fmt = format_for_path(output) if output.suffix else settings.output_format
    logger.info("Converting %s to %s (%s)", doc_path, output, fmt)
    dump(document, output, fmt=fmt, indent=settings.indent if indent is None else indent)
    click.echo(f"Wrote {output}")
