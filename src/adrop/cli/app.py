"""Main Typer CLI application for Asset Dropper."""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adrop import __app_name__, __version__

# Initialize console and app
console = Console()
app = typer.Typer(
    name=__app_name__,
    help="Convert dropped images to WebP, archive originals and publish their URLs.",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]{__app_name__}[/] version [green]{__version__}[/]")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version", "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Process everything in raw_images/ when run without a command.

    Settings come from ADROP_* environment variables or a .env file;
    TRIGGER_PAT enables the deployment trigger.
    """
    if ctx.invoked_subcommand is None:
        run()


@app.command()
def run() -> None:
    """Convert, archive, log, commit, push and trigger deployment.

    Examples:
        adrop
        TRIGGER_PAT=ghp_xxx adrop run
    """
    from adrop.config.settings import PipelineConfig, get_settings
    from adrop.core.pipeline import AssetPipeline

    config = PipelineConfig.from_settings(get_settings())
    AssetPipeline(config, console=console).run()


@app.command()
def status() -> None:
    """Show pending images and where they would be published.

    Examples:
        adrop status
    """
    from adrop.config.settings import PipelineConfig, get_settings
    from adrop.core.naming import output_filename
    from adrop.utils.files import collect_images, format_kb, get_file_size

    config = PipelineConfig.from_settings(get_settings())
    images = collect_images(config.raw_dir)

    console.print(f"[dim]Intake:[/] {escape(str(config.raw_dir))}")
    console.print(f"[dim]Destination:[/] {escape(str(config.dest_dir))}")
    console.print(f"[dim]URL prefix:[/] {config.url_prefix}", soft_wrap=True)
    trigger = "[green]enabled[/]" if config.trigger_pat else "[yellow]disabled[/]"
    console.print(f"[dim]Deploy trigger:[/] {trigger}")

    if not images:
        console.print(f"[yellow]No new images found in '{config.raw_dir.name}'.[/]")
        return

    table = Table(title=f"[bold]{len(images)} pending images[/]")
    table.add_column("Source", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Output", style="green")

    for path in images:
        table.add_row(
            escape(str(path.relative_to(config.raw_dir))),
            format_kb(get_file_size(path)),
            escape(output_filename(path)),
        )

    console.print(table)


if __name__ == "__main__":
    app()
