"""Pytest configuration and fixtures."""

import tempfile
from datetime import date
from pathlib import Path
from typing import Sequence

import pytest
from PIL import Image

from adrop.config.settings import PipelineConfig, Settings
from adrop.core.runner import CommandResult, format_command


RUN_DATE = date(2024, 3, 5)


class FakeRunner:
    """Records commands instead of running them.

    ``cwebp`` calls write a small stand-in output file unless told to fail.
    """

    def __init__(self, fail: set[str] | None = None, write_output: bool = True) -> None:
        self.calls: list[tuple[list[str], Path | None]] = []
        self.fail = fail or set()
        self.write_output = write_output

    @property
    def commands(self) -> list[list[str]]:
        return [args for args, _ in self.calls]

    def run(self, args: Sequence[str], cwd: Path | None = None) -> CommandResult:
        args = [str(a) for a in args]
        self.calls.append((args, cwd))
        command = format_command(args)
        key = " ".join(args[:2]) if args[0] == "git" else args[0]

        if args[0] == "cwebp" and self.write_output and key not in self.fail:
            output = Path(args[-1])
            output.write_bytes(b"RIFF" + b"\0" * 96)

        if key in self.fail:
            return CommandResult.failed(command, f"{key} exploded")
        return CommandResult.ok(command)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def settings(temp_dir: Path) -> Settings:
    return Settings(root=temp_dir, trigger_pat=None)


@pytest.fixture
def config(settings: Settings) -> PipelineConfig:
    """Run configuration rooted in the temp dir, dated 2024-03-05."""
    return PipelineConfig.from_settings(settings, today=RUN_DATE)


@pytest.fixture
def raw_dir(config: PipelineConfig) -> Path:
    config.raw_dir.mkdir(parents=True, exist_ok=True)
    return config.raw_dir


@pytest.fixture
def sample_image(raw_dir: Path) -> Path:
    """Create a sample test image with an awkward name."""
    img = Image.new("RGB", (100, 100), color="red")
    path = raw_dir / "photo one (1).JPG"
    img.save(path, format="JPEG", quality=95)
    return path


@pytest.fixture
def sample_png(raw_dir: Path) -> Path:
    """Create a sample PNG with transparency."""
    img = Image.new("RGBA", (100, 100), color=(255, 0, 0, 128))
    path = raw_dir / "logo_final.png"
    img.save(path)
    return path


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()
