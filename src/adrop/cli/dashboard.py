"""Rich console rendering for pipeline runs."""

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from adrop.utils.files import format_kb


@dataclass
class ProcessedAsset:
    """A converted image and where it ended up."""

    source_path: Path
    archived_path: Path
    output_path: Path
    input_size: int
    output_size: int
    url: str

    @property
    def ratio(self) -> float:
        """Compression ratio (0-1, lower is better)."""
        if self.input_size == 0:
            return 1.0
        return self.output_size / self.input_size

    @property
    def savings_percent(self) -> float:
        """Savings percentage."""
        return (1 - self.ratio) * 100


class Dashboard:
    """Console output for a pipeline run."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def show_processing(self, path: Path) -> None:
        self.console.print(f"[bold]⚙ Processing:[/] {escape(path.name)}", highlight=False)

    def show_asset(self, asset: ProcessedAsset) -> None:
        """One line per converted file: before, after and savings."""
        self.console.print(
            f"   [green]✓ Saved![/] {format_kb(asset.input_size)} -> "
            f"{format_kb(asset.output_size)} "
            f"([green]{asset.savings_percent:.1f}%[/])",
            highlight=False,
        )

    def show_batch_summary(self, assets: list[ProcessedAsset]) -> None:
        """Totals table followed by every new URL, one per paragraph."""
        total_input = sum(a.input_size for a in assets)
        total_output = sum(a.output_size for a in assets)

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Label", style="dim")
        table.add_column("Value")

        table.add_row("Files processed", f"[green]{len(assets)}[/]")
        table.add_row("Total input size", format_kb(total_input))
        table.add_row("Total output size", format_kb(total_output))
        if total_input > 0:
            savings_pct = (1 - total_output / total_input) * 100
            table.add_row("Total savings", f"[bold green]{savings_pct:.1f}%[/]")

        self.console.print()
        self.console.print(Panel(
            table,
            title="[bold cyan]Batch Summary[/]",
            border_style="cyan",
        ))

        self.console.print("\n[bold]✨ NEW LINKS:[/]")
        for asset in assets:
            # Plain output so URLs stay copyable
            self.console.print(asset.url, markup=False, highlight=False, soft_wrap=True)
            self.console.print()
