"""CLI application entry point for glyphpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from glyphpath import __version__
from glyphpath.cli.output import (
    console,
    print_check_result,
    print_error,
    print_font_info,
    print_header,
    print_step,
    print_summary,
)
from glyphpath.config import (
    LOG_LEVELS,
    GlyphPathSettings,
    LoggingConfig,
    SerializerConfig,
    UnknownCommandPolicy,
)
from glyphpath.core import PathSerializer, parse_path
from glyphpath.exceptions import (
    FontLoadError,
    GlyphPathError,
    UnrecognizedCommandError,
)
from glyphpath.io import FontReader, load_commands_json, svg_document
from glyphpath.utils import GlyphLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphpath",
    help="Serialize glyph outlines as SVG path data.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]glyphpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Serialize glyph outlines as SVG path data."""


@app.command("path")
def path_command(
    font_path: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF/OTF font file",
            show_default=False,
        ),
    ],
    glyphs: Annotated[
        list[str] | None,
        typer.Argument(
            help="Glyph names to serialize (default: every glyph)",
            show_default=False,
        ),
    ] = None,
    chars: Annotated[
        str | None,
        typer.Option(
            "--char",
            "-c",
            help="Characters to serialize, looked up through the font's cmap",
        ),
    ] = None,
    svg_dir: Annotated[
        Path | None,
        typer.Option(
            "--svg",
            help="Also write {glyph}.svg files into this directory",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Console logging level (DEBUG|INFO|WARNING|ERROR|CRITICAL)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print path data",
        ),
    ] = False,
) -> None:
    """Print the path data of glyphs in a font, one "name<TAB>path" line each.

    Example:
        glyphpath path Roboto-Regular.ttf A B -c "xyz"
    """
    if not font_path.exists():
        print_error(
            f"Input file not found: {font_path}",
            details=f"The file '{font_path}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not font_path.is_file():
        print_error(
            f"Input path is not a file: {font_path}",
            details="Please provide a path to a TTF or OTF font file.",
        )
        raise typer.Exit(code=1)

    try:
        settings = GlyphPathSettings(
            logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
        )
    except ValidationError:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Choose one of {', '.join(LOG_LEVELS)}.",
        )
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    glyph_log = GlyphLogger(logger)

    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    try:
        with FontReader(font_path, settings.font) as reader:
            if not quiet:
                print_font_info(
                    font_path=str(font_path),
                    font_type=reader.format,
                    glyph_count=reader.glyph_count,
                    upm=reader.units_per_em,
                )

            names = list(glyphs or [])
            names.extend(reader.glyph_for_char(char) for char in chars or "")
            if not names:
                names = reader.glyph_names()

            if svg_dir is not None:
                svg_dir.mkdir(parents=True, exist_ok=True)

            if not quiet:
                print_step(f"Serializing {len(names)} glyphs")

            serializer = PathSerializer(settings.serializer)
            for name in names:
                try:
                    commands = reader.get_commands(name)
                except GlyphPathError as e:
                    glyph_log.log_glyph_failed(name, e)
                    raise

                path_data = serializer.serialize(commands)
                typer.echo(f"{name}\t{path_data}")

                svg_file = None
                if svg_dir is not None:
                    svg_file = svg_dir / f"{name}.svg"
                    document = svg_document(path_data, reader.glyph_view_box(name), title=name)
                    svg_file.write_text(document, encoding="utf-8")

                glyph_log.log_glyph_serialized(name, len(commands), svg_file)

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)

    if not quiet:
        print_summary(glyph_log.serialized_count, str(svg_dir) if svg_dir is not None else None)


@app.command("serialize")
def serialize_command(
    commands_file: Annotated[
        Path,
        typer.Argument(
            help='JSON array of commands, e.g. [{"type": "M", "x": 0, "y": 0}]',
            show_default=False,
        ),
    ],
    strict: Annotated[
        bool,
        typer.Option(
            "--strict",
            help="Fail on unknown command types instead of emitting empty segments",
        ),
    ] = False,
) -> None:
    """Serialize a JSON command list to path data."""
    policy = UnknownCommandPolicy.ERROR if strict else UnknownCommandPolicy.EMPTY
    serializer = PathSerializer(SerializerConfig(unknown_commands=policy))

    try:
        commands = load_commands_json(commands_file)
        path_data = serializer.serialize(commands)
    except FileNotFoundError:
        print_error(f"Input file not found: {commands_file}")
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not read commands: {e}")
        raise typer.Exit(code=1)
    except UnrecognizedCommandError as e:
        print_error(
            f"Unknown command type at index {e.index}",
            details=f"Got {e.command!r}; drop --strict to emit an empty segment instead.",
        )
        raise typer.Exit(code=1)
    except GlyphPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    typer.echo(path_data)


@app.command("check")
def check_command(
    path_data: Annotated[
        str,
        typer.Argument(
            help="Path data string to validate",
            show_default=False,
        ),
    ],
) -> None:
    """Tokenize path data and report how many commands it holds."""
    try:
        commands = parse_path(path_data)
    except GlyphPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_check_result(len(commands))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
