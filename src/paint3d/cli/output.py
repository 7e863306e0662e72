"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from paint3d.utils.logging import RenderStats

console = Console()

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
    console.print(f"\n[bold]paint3d[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(primitive: str, width: int, height: int, is_path: bool) -> None:
    """Print what is about to be rendered."""
    kind = "path" if is_path else "shape"
    console.print(f"  {primitive} ({kind}) {SYM_DOT} {width}x{height} px")


def _format_time(ms: float) -> str:
    if ms < 1000:
        return f"{ms:.0f}ms"
    return f"{ms / 1000:.1f}s"


def print_success(output_path: str, file_size: str, stats: RenderStats) -> None:
    """Print success message with frame summary.

    Args:
        output_path: Path to output image
        file_size: Human-readable file size string
        stats: Statistics of the rendered frame
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.total_ms)}")

    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    if stats.paths_drawn:
        console.print(f"  {stats.paths_drawn} path drawn")
    else:
        console.print(
            f"  {stats.drawn} faces drawn {SYM_DOT} {stats.culled_near} near culled "
            f"{SYM_DOT} {stats.culled_backface} backfaces culled"
        )


def print_primitives(primitives: dict[str, str]) -> None:
    """Print the available primitives as a table.

    Args:
        primitives: Mapping of primitive name to description
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Primitive")
    table.add_column("Description")
    for name, description in primitives.items():
        table.add_row(name, description)
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
