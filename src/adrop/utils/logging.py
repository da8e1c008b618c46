"""Rich console output helpers for Asset Dropper."""

from rich.console import Console


# Global console instance
_console: Console | None = None


def get_console() -> Console:
    """Get or create the global Rich console."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def log_success(message: str, console: Console | None = None) -> None:
    """Log a success message."""
    (console or get_console()).print(f"[bold green]✓[/] {message}")


def log_error(message: str, console: Console | None = None) -> None:
    """Log an error message."""
    (console or get_console()).print(f"[bold red]✗[/] {message}")


def log_warning(message: str, console: Console | None = None) -> None:
    """Log a warning message."""
    (console or get_console()).print(f"[bold yellow]⚠[/] {message}")


def log_info(message: str, console: Console | None = None) -> None:
    """Log an info message."""
    (console or get_console()).print(f"[bold blue]ℹ[/] {message}")
