"""Console summaries of a generated sky."""

from rich.console import Console
from rich.table import Table

from .sky.scene_state import Scene


class SkyConsolePrinter:
    """Prints star layout statistics with rich."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def display_stats(self, scene: Scene) -> None:
        """Print counts of stars, visible image stars and relaxed placements."""
        visible = sum(1 for star in scene.image_stars if star.is_visible)
        relaxed = sum(1 for result in scene.placements if not result.satisfied)
        edges = len(scene.constellation.visible_edges())

        self.console.print(f"\n[bold]Sky {scene.width}x{scene.height}[/bold]")
        self.console.print(f"  Background stars: [cyan]{len(scene.background_stars)}[/cyan]")
        self.console.print(
            f"  Image stars: [cyan]{visible}[/cyan] visible of {len(scene.image_stars)}"
        )
        self.console.print(f"  Constellation lines: [cyan]{edges}[/cyan]")
        if relaxed:
            self.console.print(
                f"  [yellow]{relaxed} star(s) placed without meeting the spacing constraints[/yellow]"
            )

    def display_placements(self, scene: Scene) -> None:
        """Print a table of image-star positions."""
        table = Table(title="Image stars")
        table.add_column("Image", justify="right")
        table.add_column("x", justify="right")
        table.add_column("y", justify="right")
        table.add_column("Attempts", justify="right")
        table.add_column("Status")

        for star, result in zip(scene.image_stars, scene.placements):
            status = "[green]ready[/green]" if star.is_visible else f"[red]{star.asset.state.value}[/red]"
            table.add_row(
                str(star.image_id),
                f"{star.x:.0f}",
                f"{star.y:.0f}",
                str(result.attempts),
                status,
            )
        self.console.print(table)
