"""Core processing module for Asset Dropper."""

from adrop.core.converter import WebpEncoder
from adrop.core.pipeline import AssetPipeline, PipelineReport
from adrop.core.publisher import DeployTrigger, GitPublisher
from adrop.core.runner import CommandResult, SubprocessRunner

__all__ = [
    "AssetPipeline",
    "PipelineReport",
    "WebpEncoder",
    "GitPublisher",
    "DeployTrigger",
    "CommandResult",
    "SubprocessRunner",
]
