"""CLI interface for twinkle-sky."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .animation_pipeline import encode_animation
from .assets import discover_assets, load_all
from .config import StarfieldConfig
from .console_printer import SkyConsolePrinter
from .constants import (
    BACKGROUND_STAR_COUNT,
    BACKGROUND_STYLES,
    CONSTELLATION_MEMBERS,
    DEFAULT_FPS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    IMAGE_COUNT,
    SHOOTING_STAR_POLICIES,
    SHOOTING_STAR_SPAWN_PROBABILITY,
)
from .output import resolve_output_provider, supported_output_formats
from .sky.interaction import ScheduledClick
from .sky.scene_state import Scene

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()

# Initial shooting stars when they wrap around instead of bursting
WRAP_INITIAL_SHOOTING_STARS = 5


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    output: str = typer.Argument(
        "starfield.gif",
        help=f"Animation file to write ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    assets_dir: str = typer.Option(
        ".",
        "--assets",
        "-a",
        envvar="TWINKLE_SKY_ASSETS",
        help="Folder containing Image1.jpeg, Image2.jpeg, ...",
    ),
    images: int = typer.Option(IMAGE_COUNT, "--images", help="Number of image stars"),
    stars: int = typer.Option(BACKGROUND_STAR_COUNT, "--stars", help="Number of background stars"),
    width: int = typer.Option(DEFAULT_WIDTH, "--width", help="Canvas width in pixels"),
    height: int = typer.Option(DEFAULT_HEIGHT, "--height", help="Canvas height in pixels"),
    fps: int = typer.Option(DEFAULT_FPS, "--fps", help="Frames per second for the animation"),
    frames: int = typer.Option(150, "--frames", help="Number of frames to render"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for a reproducible sky"),
    policy: str = typer.Option(
        "burst",
        "--policy",
        help=f"Shooting star behaviour ({', '.join(SHOOTING_STAR_POLICIES)})",
    ),
    background: str = typer.Option(
        "solid",
        "--background",
        help=f"Background style ({', '.join(BACKGROUND_STYLES)})",
    ),
    spawn_probability: float = typer.Option(
        SHOOTING_STAR_SPAWN_PROBABILITY,
        "--spawn-probability",
        help="Chance per frame of a new shooting star",
    ),
    constellation: str = typer.Option(
        "all",
        "--constellation",
        help=f"Stars joined by constellation lines ({', '.join(CONSTELLATION_MEMBERS)})",
    ),
    click: list[str] | None = typer.Option(
        None,
        "--click",
        help="Simulated click as x,y@frame (repeatable)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug diagnostics"),
) -> None:
    """
    Render an animated starfield with clickable image stars.

    Examples:
      # 5 seconds of sky using images from ./photos
      twinkle-sky sky.gif --assets photos --frames 150

      # Open the popup of whichever star sits near (400, 300) on frame 30
      twinkle-sky sky.webp --seed 7 --click 400,300@30
    """
    _configure_logging(verbose)
    try:
        config = _build_config(
            width=width,
            height=height,
            image_count=images,
            background_star_count=stars,
            shooting_star_policy=policy,
            background=background,
            spawn_probability=spawn_probability,
            constellation_members=constellation,
        )
        clicks = _parse_clicks(click or [])
        _generate_output(config, assets_dir, output, fps, frames, seed, clicks)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _build_config(**options: object) -> StarfieldConfig:
    if options.get("shooting_star_policy") == "wrap":
        options["initial_shooting_stars"] = WRAP_INITIAL_SHOOTING_STARS
    try:
        return StarfieldConfig(**options)
    except ValueError as e:
        raise CLIError(str(e))


def _parse_clicks(values: list[str]) -> list[ScheduledClick]:
    try:
        return [ScheduledClick.parse(value) for value in values]
    except ValueError as e:
        raise CLIError(str(e))


def _print_summary(scene: Scene) -> None:
    printer = SkyConsolePrinter(console)
    printer.display_stats(scene)
    printer.display_placements(scene)


def _generate_output(
    config: StarfieldConfig,
    assets_dir: str,
    output_path: str,
    fps: int,
    frames: int,
    seed: int | None,
    clicks: list[ScheduledClick],
) -> None:
    """Load the images, summarise the layout and write the animation."""
    if fps <= 0 or frames <= 0:
        raise CLIError("--fps and --frames must be positive")
    try:
        provider = resolve_output_provider(output_path)
    except ValueError as e:
        raise CLIError(str(e))

    if not Path(assets_dir).is_dir():
        raise CLIError(f"Assets folder not found: {assets_dir}")

    console.print(f"[bold blue]Loading {config.image_count} images from {assets_dir}...[/bold blue]")
    assets = discover_assets(assets_dir, config.image_count)
    ready = load_all(assets)
    console.print(f"[green]✓[/green] {ready} of {len(assets)} images loaded")

    ext = Path(output_path).suffix[1:].upper()
    console.print(f"\n[bold blue]Generating {ext} animation...[/bold blue]")
    try:
        encoded = encode_animation(
            config,
            assets,
            output_path,
            fps=fps,
            max_frames=frames,
            seed=seed,
            clicks=clicks,
            provider=provider,
            on_scene=_print_summary,
        )
        console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
        provider.write(encoded)
        console.print(f"[green]✓[/green] {ext} saved to {output_path}")
    except (OSError, ValueError) as e:
        raise CLIError(f"Failed to generate output: {e}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
