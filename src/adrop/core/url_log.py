"""Newest-first log of published asset URLs."""

from pathlib import Path


ENTRY_SEPARATOR = "\n\n"

# Undecodable bytes from hand edits are written back unchanged
LOG_ERRORS = "surrogateescape"


def read_log(log_file: Path) -> str:
    """Current log content, or an empty string if the log does not exist."""
    if not log_file.exists():
        return ""
    return log_file.read_text(encoding="utf-8", errors=LOG_ERRORS)


def prepend_urls(log_file: Path, urls: list[str]) -> str:
    """Write a new batch of URLs ahead of everything already logged.

    Args:
        log_file: Log file path. Its directory must exist.
        urls: URLs of the batch, in processing order.

    Returns:
        The content written.
    """
    previous = read_log(log_file)
    content = ENTRY_SEPARATOR.join(urls) + ENTRY_SEPARATOR + previous
    log_file.write_text(content, encoding="utf-8", errors=LOG_ERRORS)
    return content
