"""Rich console output helpers for the CLI.

Status messages go to stderr so stdout carries only path data and can
be piped.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]glyphpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font_type: str, glyph_count: int, upm: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        font_type: Font format type (e.g., "TrueType", "OpenType")
        glyph_count: Total number of glyphs in font
        upm: Units per em value
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    console.print(f"  {glyph_count:,} glyphs {SYM_DOT} {upm:,} UPM")


def print_summary(glyphs: int, svg_dir: str | None = None) -> None:
    """Print the closing summary of a path extraction run.

    Args:
        glyphs: Number of glyphs serialized
        svg_dir: Directory SVG files were written to, if any
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] {SYM_DOT} {glyphs} glyphs")
    if svg_dir is not None:
        line = Text("  SVG files in ")
        line.append(svg_dir, style="bold")
        console.print(line)


def print_check_result(command_count: int) -> None:
    """Print the result of a successful path check."""
    plural = "command" if command_count == 1 else "commands"
    console.print(f"[bold green]{SYM_OK} Valid[/bold green] {SYM_DOT} {command_count} {plural}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}", markup=True, highlight=False)
    if details:
        console.print(f"  {details}", markup=False)
