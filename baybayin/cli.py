"""Baybayin CLI - Main entry point."""

import asyncio
import sys
from pathlib import Path

import click

from baybayin.config import load_settings
from baybayin.errors import BaybayinError
from baybayin.export.batch import convert_file
from baybayin.qc.coverage import check_coverage
from baybayin.tables.fonts import FONT_PROFILES, VOWEL_CANCELLERS, font_family
from baybayin.translate.stream import TranslationClient, translate_to_baybayin
from baybayin.transliterate import convert as convert_text
from baybayin.transliterate import resolve_canceller, supported_cancellers
from baybayin.utils.log import setup_logging


FONT_CHOICE = click.Choice(list(FONT_PROFILES))


def _fail(ctx: click.Context, message: str, error: Exception) -> None:
    """Log an error and exit with status 1."""
    ctx.obj["logger"].error(f"{message}: {error}", exc_info=True)
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _read_text(parts: tuple[str, ...]) -> str:
    """Join TEXT arguments, or read stdin when given '-'."""
    if parts == ("-",):
        return click.get_text_stream("stdin").read()
    return " ".join(parts)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (default: etc/settings.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Latin to Baybayin transliteration CLI."""
    try:
        settings = load_settings(config_path)
    except BaybayinError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log_level = "DEBUG" if verbose else settings["logging"]["level"]
    log_format = settings["logging"].get("format", "pretty")
    log_file = settings["logging"].get("file")

    logger = setup_logging(
        level=log_level,
        format_type=log_format,
        log_file=Path(log_file) if log_file else None,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


@cli.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--canceller", "-c", help="Vowel canceller (+, x, ], _)")
@click.option("--font", "-f", type=FONT_CHOICE, help="Baybayin font")
@click.option("--endings", is_flag=True, help="Rewrite English endings (-hn, -gh) first")
@click.pass_context
def convert(
    ctx: click.Context,
    text: tuple[str, ...],
    canceller: str | None,
    font: str | None,
    endings: bool,
) -> None:
    """Convert TEXT to Baybayin ('-' reads stdin)."""
    defaults = ctx.obj["settings"]["defaults"]
    font = font or defaults["font"]
    canceller = canceller or defaults["canceller"]

    resolved = resolve_canceller(canceller, font)
    if resolved != canceller:
        ctx.obj["logger"].warning(f"{font} does not support {canceller!r}, using {resolved!r}")

    click.echo(convert_text(_read_text(text), resolved, font, normalize_endings=endings))


@cli.command()
@click.option("--font", "-f", type=FONT_CHOICE, help="Baybayin font")
@click.pass_context
def cancellers(ctx: click.Context, font: str | None) -> None:
    """List the vowel cancellers a font supports."""
    font = font or ctx.obj["settings"]["defaults"]["font"]

    click.echo(f"{font}:")
    for symbol in supported_cancellers(font):
        info = VOWEL_CANCELLERS[symbol]
        era = "modern" if info.is_modern else "historical"
        click.echo(f"  {symbol}  {info.name:<10} ({era}) {info.description}")


@cli.command()
def fonts() -> None:
    """List fonts and their canceller support."""
    header = "  ".join(f"{c.symbol:^3}" for c in VOWEL_CANCELLERS.values())
    click.echo(f"{'Font':<22}{header}")
    click.echo("-" * (22 + len(header)))

    for name, profile in FONT_PROFILES.items():
        row = "  ".join(f"{'yes' if profile.supports(s) else '-':^3}" for s in VOWEL_CANCELLERS)
        click.echo(f"{name:<22}{row}")


@cli.command()
@click.argument("input_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("output_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--column", help="Column holding Latin text")
@click.option("--canceller", "-c", help="Vowel canceller (+, x, ], _)")
@click.option("--font", "-f", type=FONT_CHOICE, help="Baybayin font")
@click.option("--no-progress", is_flag=True, help="Hide the progress bar")
@click.pass_context
def batch(
    ctx: click.Context,
    input_path: Path,
    output_path: Path,
    column: str | None,
    canceller: str | None,
    font: str | None,
    no_progress: bool,
) -> None:
    """Convert a column of a CSV, JSONL or Parquet file."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    try:
        result = convert_file(
            input_path,
            output_path,
            logger,
            column=column or settings["batch"]["column"],
            canceller=canceller or settings["defaults"]["canceller"],
            font=font or settings["defaults"]["font"],
            progress=not no_progress,
        )
    except BaybayinError as e:
        _fail(ctx, "Batch conversion failed", e)
        return

    click.echo(f"Converted {result.rows} rows -> {result.output_path}")


@cli.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--canceller", "-c", help="Vowel canceller (+, x, ], _)")
@click.option("--font", "-f", type=FONT_CHOICE, help="Baybayin font")
@click.pass_context
def check(ctx: click.Context, text: tuple[str, ...], canceller: str | None, font: str | None) -> None:
    """Report characters in TEXT that have no Baybayin mapping."""
    defaults = ctx.obj["settings"]["defaults"]
    lines = _read_text(text).splitlines() or [""]

    result = check_coverage(
        lines,
        ctx.obj["logger"],
        canceller=canceller or defaults["canceller"],
        font=font or defaults["font"],
    )

    if result.is_complete:
        click.echo("All characters transliterated")
        return

    click.echo(f"{result.texts_with_passthrough}/{result.total_texts} lines with untransliterated characters:")
    for char, count in result.passthrough_chars.most_common():
        click.echo(f"  {char!r}: {count}")


@cli.command()
@click.argument("prompt", nargs=-1, required=True)
@click.option("--endpoint", help="Translation endpoint URL")
@click.option("--canceller", "-c", help="Vowel canceller (+, x, ], _)")
@click.option("--font", "-f", type=FONT_CHOICE, help="Baybayin font")
@click.pass_context
def translate(
    ctx: click.Context,
    prompt: tuple[str, ...],
    endpoint: str | None,
    canceller: str | None,
    font: str | None,
) -> None:
    """Translate PROMPT to Tagalog via the streaming service, then convert it."""
    settings = ctx.obj["settings"]
    if endpoint:
        settings["translate"]["endpoint"] = endpoint

    font = font or settings["defaults"]["font"]
    client = TranslationClient.from_settings(settings)

    try:
        result = asyncio.run(
            translate_to_baybayin(
                client,
                _read_text(prompt),
                canceller=canceller or settings["defaults"]["canceller"],
                font=font,
            )
        )
    except BaybayinError as e:
        _fail(ctx, "Translation failed", e)
        return

    click.echo(f"Tagalog:  {result.text}")
    click.echo(f"Baybayin: {result.baybayin}")
    click.echo(f"Font:     {font_family(font)}")


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
