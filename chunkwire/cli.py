"""Command line entry point for chunkwire."""

from pathlib import Path

import click

from chunkwire.common.config import ChunkwireConfig
from chunkwire.common.log_base import get_logger, setup_logging
from chunkwire.protocol import Chunk, ChunkwireError

logger = get_logger(__name__)


@click.group()
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path"
)
@click.option(
    "--log-level",
    type=click.Choice(["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level"
)
@click.pass_context
def main(ctx: click.Context, config_file: Path | None, log_level: str | None) -> None:
    """
    chunkwire - build and inspect PNG-style chunk records.

    Examples:
        # Build a chunk and print it as hex
        chunkwire pack RuSt "hello world" --hex

        # Parse a chunk stored in a file
        chunkwire inspect chunk.bin --strict
    """
    try:
        config = ChunkwireConfig.from_file(config_file) if config_file else ChunkwireConfig()
    except Exception as e:
        raise click.ClickException(f"Failed to load configuration: {e}") from e

    if log_level:
        config.logging.level = log_level.upper()

    setup_logging(config.logging)
    ctx.obj = config


@main.command()
@click.argument("type_text", metavar="TYPE")
@click.argument("payload")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write serialized chunk to this file"
)
@click.option("--hex", "as_hex", is_flag=True, help="Print serialized chunk as hex")
def pack(type_text: str, payload: str, output: Path | None, as_hex: bool) -> None:
    """Serialize a chunk from a TYPE tag and a text PAYLOAD."""
    try:
        chunk = Chunk.from_text(type_text, payload)
    except ChunkwireError as e:
        logger.error("Failed to build chunk", error=str(e))
        raise click.ClickException(str(e)) from e

    if not chunk.type_tag.is_valid():
        logger.warning("Type tag has reserved bit set", type_tag=str(chunk.type_tag))

    data = chunk.serialize()

    if output is not None:
        output.write_bytes(data)
        logger.info("Chunk written", path=str(output), size=len(data))

    if as_hex or output is None:
        click.echo(data.hex())


@main.command()
@click.argument(
    "input_file",
    metavar="FILE",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--strict", is_flag=True, help="Reject bytes after the CRC field")
@click.option("--text", "show_text", is_flag=True, help="Print payload as UTF-8 text")
@click.pass_obj
def inspect(config: ChunkwireConfig, input_file: Path, strict: bool, show_text: bool) -> None:
    """Parse a single chunk from FILE and describe it."""
    parse_config = config.parse
    if strict:
        parse_config = parse_config.model_copy(update={"reject_trailing_bytes": True})

    try:
        chunk = Chunk.parse(input_file.read_bytes(), parse_config)
        click.echo(chunk.describe())
        if show_text:
            click.echo(chunk.payload_as_text())
    except ChunkwireError as e:
        logger.error("Failed to parse chunk", path=str(input_file), error=str(e))
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
