"""WebP conversion through the external ``cwebp`` encoder."""

from pathlib import Path

from adrop.config.settings import PipelineConfig
from adrop.core.runner import CommandResult, CommandRunner


class WebpEncoder:
    """Builds and runs the encoder command for one image at a time."""

    def __init__(self, config: PipelineConfig, runner: CommandRunner) -> None:
        self.config = config
        self.runner = runner

    def build_args(self, input_path: Path, output_path: Path) -> list[str]:
        """Encoder arguments for a single conversion.

        Width is capped at ``max_width``; a height of 0 keeps the aspect ratio.
        """
        cfg = self.config
        args = [
            cfg.encoder,
            "-q", str(cfg.quality),
            "-m", str(cfg.method),
            "-pass", str(cfg.passes),
        ]
        if cfg.multithread:
            args.append("-mt")
        args += [
            "-resize", str(cfg.max_width), "0",
            str(input_path),
            "-o", str(output_path),
        ]
        return args

    def encode(self, input_path: Path, output_path: Path) -> CommandResult:
        """Convert ``input_path`` to WebP at ``output_path``."""
        return self.runner.run(self.build_args(input_path, output_path))
