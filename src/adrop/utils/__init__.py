"""Utility module for Asset Dropper."""

from adrop.utils.files import collect_images, get_file_size
from adrop.utils.logging import get_console

__all__ = ["collect_images", "get_file_size", "get_console"]
