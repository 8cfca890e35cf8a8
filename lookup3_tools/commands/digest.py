"""Hash command for computing hashlittle2 digests."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click
import structlog
from rich.console import Console
from rich.table import Table

from lookup3_tools.core.config import AppConfig
from lookup3_tools.core.types import DigestWidth, HashResult
from lookup3_tools.core.utils import format_digest, format_size, read_all, unhexlify
from lookup3_tools.hashing.mixer import HashLittle2

logger = structlog.get_logger()


def _get_context_objects(ctx: click.Context) -> tuple[AppConfig, Console, bool, bool]:
    """Extract common context objects."""
    config: AppConfig = ctx.obj["config"]
    console: Console = ctx.obj["console"]
    verbose: bool = ctx.obj["verbose"]
    debug: bool = ctx.obj["debug"]
    return config, console, verbose, debug


def hash_input(source: str, data: bytes, width: DigestWidth = DigestWidth.FULL) -> HashResult:
    """Hash one complete input.

    Args:
        source: Label for the input
        data: Entire input
        width: Digest width to report

    Returns:
        Hash result
    """
    hasher = HashLittle2()
    length = hasher.update(data)
    logger.debug("input_hashed", source=source, input_length=length)
    return HashResult(source=source, length=length, hash64=hasher.digest64(), width=width)


def _collect_inputs(
    values: tuple[str, ...],
    files: tuple[Path, ...],
    hex_input: bool,
    encoding: str,
) -> list[tuple[str, bytes]]:
    """Turn CLI arguments into (label, bytes) pairs.

    Raises:
        click.ClickException: If a value is not valid hex or a file cannot be read
    """
    inputs: list[tuple[str, bytes]] = []

    for value in values:
        if hex_input:
            try:
                inputs.append((value, unhexlify(value)))
            except ValueError as e:
                logger.error("Invalid hex input", value=value)
                raise click.ClickException(str(e)) from e
        else:
            inputs.append((value, value.encode(encoding)))

    for path in files:
        try:
            with open(path, "rb") as f:
                inputs.append((str(path), read_all(f)))
        except OSError as e:
            logger.error("Failed to read file", path=str(path), error=str(e))
            raise click.ClickException(f"Failed to read file {path}: {e}") from e

    if not inputs:
        inputs.append(("<stdin>", read_all(sys.stdin.buffer)))

    return inputs


def _result_to_dict(result: HashResult, upper: bool) -> dict[str, Any]:
    return {
        "source": result.source,
        "length": result.length,
        "width": int(result.width),
        "digest": format_digest(result.value, result.width, upper),
        "hash32": result.hash32,
        "hash64": result.hash64,
    }


def _output_json(data: list[dict[str, Any]], console: Console) -> None:
    """Output data as JSON."""
    print(json.dumps(data, indent=2, default=str))


def _output_table(results: list[HashResult], console: Console, upper: bool) -> None:
    """Output results using Rich formatting."""
    table = Table(title="hashlittle2")
    table.add_column("Input", style="cyan")
    table.add_column("Size", style="white", justify="right")
    table.add_column("Digest", style="green")

    for result in results:
        table.add_row(
            result.source,
            format_size(result.length),
            format_digest(result.value, result.width, upper),
        )

    console.print(table)


@click.command(name="hash")
@click.argument("values", nargs=-1)
@click.option(
    "--file",
    "-f",
    "files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File to hash (read whole, may be repeated)",
)
@click.option("--hex", "hex_input", is_flag=True, help="Decode VALUES from hex instead of text")
@click.option(
    "--bits",
    type=click.Choice(["32", "64"]),
    default=None,
    help="Digest width in bits (defaults to configuration)",
)
@click.option("--upper", is_flag=True, help="Print digests in uppercase hex")
@click.pass_context
def hash_command(
    ctx: click.Context,
    values: tuple[str, ...],
    files: tuple[Path, ...],
    hex_input: bool,
    bits: str | None,
    upper: bool,
) -> None:
    """Hash VALUES, files or stdin with hashlittle2.

    Each input is hashed in one piece. With no VALUES and no --file,
    all of stdin is read and hashed.
    """
    config, console, verbose, _ = _get_context_objects(ctx)

    width = DigestWidth(int(bits)) if bits else config.digest_width
    upper = upper or config.uppercase_hex

    inputs = _collect_inputs(values, files, hex_input, config.text_encoding)
    results = [hash_input(source, data, width) for source, data in inputs]

    if verbose:
        logger.info("inputs_hashed", count=len(results), width=int(width))

    if config.output_format == "json":
        _output_json([_result_to_dict(result, upper) for result in results], console)
    elif config.output_format == "plain":
        for result in results:
            click.echo(f"{format_digest(result.value, result.width, upper)}  {result.source}")
    else:
        _output_table(results, console, upper)
