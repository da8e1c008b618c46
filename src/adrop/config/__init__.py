"""Configuration module for Asset Dropper."""

from adrop.config.settings import Settings, PipelineConfig, get_settings

__all__ = ["Settings", "PipelineConfig", "get_settings"]
