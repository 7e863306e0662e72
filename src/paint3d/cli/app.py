"""CLI application entry point for paint3d.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from paint3d import __version__
from paint3d.cli.output import (
    console,
    print_error,
    print_header,
    print_primitives,
    print_scene_info,
    print_step,
    print_success,
)
from paint3d.cli.scene import PRIMITIVES, SceneOptions, render_scene
from paint3d.config import LoggingConfig, LogLevel, Paint3DSettings, RenderConfig, SurfaceConfig
from paint3d.exceptions import Paint3DError, SurfaceSaveError, UnknownPrimitiveError
from paint3d.render import ImageSurface
from paint3d.utils.logging import configure_logging

# Create the Typer app
app = typer.Typer(
    name="paint3d",
    help="Render 3D shapes and paths to images with a painter's algorithm renderer.",
    add_completion=False,
    no_args_is_help=True,
)

_PATH_PRIMITIVES = {"circle", "spiral"}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]paint3d[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Render 3D shapes and paths to images."""


@app.command()
def primitives() -> None:
    """List the primitives that can be rendered."""
    print_primitives({name: description for name, (description, _) in PRIMITIVES.items()})


@app.command()
def render(
    primitive: Annotated[
        str,
        typer.Argument(help="Primitive to render (see 'paint3d primitives')", show_default=False),
    ],
    output: Annotated[
        Path,
        typer.Argument(help="Output image path (PNG recommended)", show_default=False),
    ],
    width: Annotated[int, typer.Option("--width", help="Image width", min=1, max=16384)] = 640,
    height: Annotated[int, typer.Option("--height", help="Image height", min=1, max=16384)] = 480,
    rotate_x: Annotated[float, typer.Option("--rotate-x", help="Rotation about x, radians")] = 0.0,
    rotate_y: Annotated[float, typer.Option("--rotate-y", help="Rotation about y, radians")] = 0.0,
    rotate_z: Annotated[float, typer.Option("--rotate-z", help="Rotation about z, radians")] = 0.0,
    distance: Annotated[
        float,
        typer.Option("--distance", "-d", help="Camera distance from the object", min=1.0),
    ] = 5.0,
    focal_length: Annotated[
        float,
        typer.Option("--focal-length", "-f", help="Camera focal length (zoom)", min=0.01),
    ] = 1.0,
    subdivide: Annotated[
        int,
        typer.Option("--subdivide", "-s", help="Linear subdivision passes", min=0, max=5),
    ] = 0,
    smooth: Annotated[
        float,
        typer.Option("--smooth", help="Average smoothing amount (0-1)", min=0.0, max=1.0),
    ] = 0.0,
    extrude_count: Annotated[
        int,
        typer.Option("--extrude-count", help="Extrude every face in this many steps", min=0, max=32),
    ] = 0,
    extrude_distance: Annotated[
        float,
        typer.Option("--extrude-distance", help="Total extrusion distance"),
    ] = 0.5,
    triangulate: Annotated[
        bool,
        typer.Option("--triangulate", help="Split quads into triangles"),
    ] = False,
    stroke: Annotated[
        bool,
        typer.Option("--stroke", help="Outline faces (or stroke paths)"),
    ] = False,
    no_fill: Annotated[
        bool,
        typer.Option("--no-fill", help="Do not fill faces"),
    ] = False,
    backfaces: Annotated[
        bool,
        typer.Option("--backfaces", help="Draw faces pointing away from the camera"),
    ] = False,
    no_sort: Annotated[
        bool,
        typer.Option("--no-sort", help="Draw faces in buffer order instead of back to front"),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Render a primitive to an image file.

    Example:
        paint3d render cube cube.png --rotate-x 0.5 --rotate-y 0.7

    This will write a 640x480 PNG of a flat shaded cube.
    """
    if primitive not in PRIMITIVES:
        err = UnknownPrimitiveError(primitive, sorted(PRIMITIVES))
        print_error(str(err), details="Run 'paint3d primitives' to list them.")
        raise typer.Exit(code=1)

    if no_fill and not stroke and primitive not in _PATH_PRIMITIVES:
        print_error("Nothing to draw", details="Use --stroke together with --no-fill.")
        raise typer.Exit(code=1)

    # Create settings from CLI arguments
    try:
        settings = Paint3DSettings(
            render=RenderConfig(
                perform_z_sorting=not no_sort,
                draw_backfaces=backfaces,
                focal_length=focal_length,
            ),
            surface=SurfaceConfig(width=width, height=height),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
        options = SceneOptions(
            rotate_x=rotate_x,
            rotate_y=rotate_y,
            rotate_z=rotate_z,
            distance=distance,
            subdivide=subdivide,
            smooth=smooth,
            extrude_count=extrude_count,
            extrude_distance=extrude_distance,
            triangulate=triangulate,
            stroke=stroke,
            fill=not no_fill,
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    if log_file is not None or log_level is not LogLevel.WARNING:
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level.value,
            file_level=settings.logging.file_log_level.value,
            quiet=quiet,
        )

    if not quiet:
        print_header(__version__)
        print_step("Rendering")
        print_scene_info(primitive, width, height, primitive in _PATH_PRIMITIVES)

    try:
        surface = ImageSurface.from_config(settings.surface, settings.path.flatten_tolerance)
        stats = render_scene(primitive, surface, settings, options)
        surface.write(output)

        if not quiet:
            print_success(str(output), _format_file_size(output), stats)

    except SurfaceSaveError as e:
        print_error(f"Could not save image: {e.reason}")
        raise typer.Exit(code=1)
    except Paint3DError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ZeroDivisionError as e:
        print_error(f"Degenerate geometry: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "42 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
