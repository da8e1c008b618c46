"""Asset Dropper - batch WebP publishing pipeline for dropped images."""

__app_name__ = "adrop"
__version__ = "0.1.0"
