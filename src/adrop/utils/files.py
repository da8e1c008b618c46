"""File discovery and size helpers for the intake directory."""

import shutil
from pathlib import Path


# Intake extensions, matched case-sensitively
PENDING_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".JPG", ".PNG", ".webp"})


def is_pending_image(path: Path) -> bool:
    """Check if a path looks like a raw image waiting to be processed."""
    if path.name.startswith("."):
        return False
    return path.suffix in PENDING_EXTENSIONS


def collect_images(directory: Path) -> list[Path]:
    """Collect pending images under a directory, recursively.

    Args:
        directory: Intake directory to scan.

    Returns:
        Sorted list of image file paths. Empty if the directory is missing.
    """
    if not directory.is_dir():
        return []

    images = []
    for path in directory.rglob("*"):
        hidden = any(part.startswith(".") for part in path.relative_to(directory).parts)
        if path.is_file() and not hidden and is_pending_image(path):
            images.append(path)

    return sorted(images)


def get_file_size(path: Path) -> int:
    """Get file size in bytes."""
    return path.stat().st_size


def format_kb(size_bytes: int) -> str:
    """Format a byte count as kilobytes with two decimals."""
    return f"{size_bytes / 1024:.2f} KB"


def move_file(source: Path, destination_dir: Path) -> Path:
    """Move a file into a directory, keeping its name.

    Falls back to a copy-and-delete when a plain rename crosses devices.
    """
    target = destination_dir / source.name
    try:
        source.rename(target)
    except OSError:
        shutil.move(str(source), str(target))
    return target
