"""Commit/push of the storage repository and the deployment trigger."""

import json
import urllib.error
import urllib.request
from typing import Any, Callable

from adrop.config.settings import PipelineConfig
from adrop.core.runner import CommandResult, CommandRunner


class GitPublisher:
    """Stage, commit and push everything in the project root."""

    def __init__(self, config: PipelineConfig, runner: CommandRunner) -> None:
        self.config = config
        self.runner = runner

    def commit_message(self, count: int) -> str:
        return f"Auto-upload assets: {count} new images"

    def publish(self, count: int) -> list[CommandResult]:
        """Run add, commit and push in sequence.

        Every step is attempted even if an earlier one failed.

        Args:
            count: Number of images in this batch, for the commit message.

        Returns:
            One CommandResult per git call, in order.
        """
        cfg = self.config
        commands = [
            ["git", "add", "."],
            ["git", "commit", "-m", self.commit_message(count)],
            ["git", "push", cfg.remote, cfg.branch],
        ]
        return [self.runner.run(args, cwd=cfg.root) for args in commands]


class DeployTrigger:
    """Fire a ``repository_dispatch`` event on the public deployer repo."""

    def __init__(
        self,
        config: PipelineConfig,
        opener: Callable[..., Any] | None = None,
        timeout: float = 30,
    ) -> None:
        self.config = config
        self.opener = opener or urllib.request.urlopen
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.config.trigger_pat)

    def build_request(self) -> urllib.request.Request:
        cfg = self.config
        body = json.dumps({"event_type": cfg.event_type}).encode("utf-8")
        return urllib.request.Request(
            cfg.dispatch_url,
            data=body,
            method="POST",
            headers={
                "Accept": "application/vnd.github.v3+json",
                "Authorization": f"token {cfg.trigger_pat}",
                "Content-Type": "application/json",
            },
        )

    def send(self) -> CommandResult:
        """POST the dispatch event.

        Returns:
            CommandResult; unsuccessful on HTTP or network errors.
        """
        command = f"POST {self.config.dispatch_url}"
        if not self.enabled:
            return CommandResult.failed(command, "TRIGGER_PAT not set")

        try:
            with self.opener(self.build_request(), timeout=self.timeout) as response:
                status = getattr(response, "status", None)
                return CommandResult.ok(command, output=f"HTTP {status}")
        except urllib.error.HTTPError as e:
            return CommandResult.failed(command, f"HTTP {e.code}: {e.reason}")
        except urllib.error.URLError as e:
            return CommandResult.failed(command, f"Request failed: {e.reason}")
        except OSError as e:
            return CommandResult.failed(command, str(e))
