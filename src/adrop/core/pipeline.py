"""Sequential batch pipeline: convert, archive, log, publish, trigger."""

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from adrop.cli.dashboard import Dashboard, ProcessedAsset
from adrop.config.settings import PipelineConfig
from adrop.core.converter import WebpEncoder
from adrop.core.naming import output_filename
from adrop.core.publisher import DeployTrigger, GitPublisher
from adrop.core.runner import CommandResult, CommandRunner, SubprocessRunner
from adrop.core.url_log import prepend_urls
from adrop.utils.files import collect_images, get_file_size, move_file
from adrop.utils.logging import log_error, log_info, log_success, log_warning


@dataclass
class PipelineReport:
    """What happened during one run."""

    assets: list[ProcessedAsset] = field(default_factory=list)
    warnings: list[CommandResult] = field(default_factory=list)
    trigger_sent: bool = False
    error: str | None = None

    @property
    def urls(self) -> list[str]:
        return [a.url for a in self.assets]

    @property
    def success(self) -> bool:
        return self.error is None


class AssetPipeline:
    """Turns dropped images into published WebP assets.

    Files are handled one at a time in discovery order. Failures of
    external calls are reported and skipped over; anything else ends the
    run through :meth:`run`.
    """

    def __init__(
        self,
        config: PipelineConfig,
        runner: CommandRunner | None = None,
        console: Console | None = None,
        trigger: DeployTrigger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Frozen run configuration.
            runner: Command runner for the encoder and git.
            console: Rich console for output.
            trigger: Deployment trigger (built from config if None).
        """
        self.config = config
        self.runner = runner or SubprocessRunner()
        self.console = console or Console()
        self.dashboard = Dashboard(self.console)
        self.encoder = WebpEncoder(config, self.runner)
        self.publisher = GitPublisher(config, self.runner)
        self.trigger = trigger or DeployTrigger(config)

    def run(self) -> PipelineReport:
        """Run every step; never raises."""
        report = PipelineReport()
        try:
            self._run(report)
        except Exception as e:
            report.error = f"{type(e).__name__}: {e}"
            log_error(f"[bold red]CRITICAL ERROR:[/] {escape(report.error)}", self.console)
        return report

    def prepare_directories(self) -> None:
        """Create the dated output, URL log and archive directories."""
        for directory in (
            self.config.dest_dir,
            self.config.url_log_file.parent,
            self.config.processed_dir,
        ):
            directory.mkdir(parents=True, exist_ok=True)

    def process_image(self, path: Path, report: PipelineReport) -> ProcessedAsset:
        """Convert one image, archive its original and build its URL."""
        self.dashboard.show_processing(path)
        input_size = get_file_size(path)

        filename = output_filename(path)
        output_path = self.config.dest_dir / filename

        result = self.encoder.encode(path, output_path)
        self._check(result, report)

        # A missing output is fatal here rather than producing a dead URL
        output_size = get_file_size(output_path)

        archived_path = move_file(path, self.config.processed_dir)

        asset = ProcessedAsset(
            source_path=path,
            archived_path=archived_path,
            output_path=output_path,
            input_size=input_size,
            output_size=output_size,
            url=self.config.url_for(filename),
        )
        self.dashboard.show_asset(asset)
        return asset

    def _run(self, report: PipelineReport) -> None:
        cfg = self.config
        self.prepare_directories()

        images = collect_images(cfg.raw_dir)
        if not images:
            log_info(f"No new images found in '{escape(cfg.raw_dir.name)}'.", self.console)
            return

        log_info(
            f"Found {len(images)} images. Processing for {escape(cfg.github_owner)}...",
            self.console,
        )

        for path in images:
            report.assets.append(self.process_image(path, report))

        prepend_urls(cfg.url_log_file, report.urls)
        log_success("Updated log file.", self.console)

        log_info(f"Pushing to private storage ({escape(cfg.private_repo)})...", self.console)
        for result in self.publisher.publish(len(report.assets)):
            self._check(result, report)

        if self.trigger.enabled:
            log_info(f"Triggering deployment on {escape(cfg.public_repo)}...", self.console)
            result = self.trigger.send()
            if self._check(result, report):
                report.trigger_sent = True
                log_success("Signal sent!", self.console)
        else:
            log_warning("SKIPPING TRIGGER: TRIGGER_PAT not set.", self.console)

        self.dashboard.show_batch_summary(report.assets)

    def _check(self, result: CommandResult, report: PipelineReport) -> bool:
        """Warn about a failed external call and keep going."""
        if not result.success:
            report.warnings.append(result)
            log_warning(f"Warning: {escape(result.message)}", self.console)
        return result.success
