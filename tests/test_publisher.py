"""Tests for git publishing and the deployment trigger."""

import dataclasses
import io
import json
import urllib.error

from adrop.config.settings import PipelineConfig
from adrop.core.publisher import DeployTrigger, GitPublisher

from conftest import FakeRunner


class FakeResponse:
    status = 204

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class RecordingOpener:
    def __init__(self, error: Exception | None = None) -> None:
        self.requests = []
        self.error = error

    def __call__(self, request, timeout=None):
        self.requests.append((request, timeout))
        if self.error:
            raise self.error
        return FakeResponse()


class TestGitPublisher:
    """Tests for GitPublisher."""

    def test_commands_in_order(self, config: PipelineConfig, runner: FakeRunner):
        results = GitPublisher(config, runner).publish(3)

        assert runner.commands == [
            ["git", "add", "."],
            ["git", "commit", "-m", "Auto-upload assets: 3 new images"],
            ["git", "push", "origin", "main"],
        ]
        assert all(cwd == config.root for _, cwd in runner.calls)
        assert all(r.success for r in results)

    def test_failures_do_not_stop_later_steps(self, config: PipelineConfig):
        runner = FakeRunner(fail={"git add", "git commit"})

        results = GitPublisher(config, runner).publish(1)

        assert [r.success for r in results] == [False, False, True]
        assert len(runner.commands) == 3


class TestDeployTrigger:
    """Tests for DeployTrigger."""

    def test_disabled_without_token(self, config: PipelineConfig):
        opener = RecordingOpener()
        trigger = DeployTrigger(config, opener=opener)

        assert not trigger.enabled
        assert not trigger.send().success
        assert opener.requests == []

    def test_dispatch_request(self, config: PipelineConfig):
        opener = RecordingOpener()
        trigger = DeployTrigger(dataclasses.replace(config, trigger_pat="ghp_abc"), opener=opener)

        result = trigger.send()

        assert result.success
        request, timeout = opener.requests[0]
        assert request.full_url == config.dispatch_url
        assert request.get_method() == "POST"
        assert request.get_header("Authorization") == "token ghp_abc"
        assert request.get_header("Accept") == "application/vnd.github.v3+json"
        assert json.loads(request.data) == {"event_type": "deploy_assets"}
        assert timeout == 30

    def test_http_error_is_soft_failure(self, config: PipelineConfig):
        error = urllib.error.HTTPError(
            config.dispatch_url, 401, "Unauthorized", {}, io.BytesIO(b"")
        )
        trigger = DeployTrigger(
            dataclasses.replace(config, trigger_pat="bad"),
            opener=RecordingOpener(error),
        )

        result = trigger.send()

        assert not result.success
        assert "401" in result.message

    def test_network_error_is_soft_failure(self, config: PipelineConfig):
        trigger = DeployTrigger(
            dataclasses.replace(config, trigger_pat="ghp_abc"),
            opener=RecordingOpener(urllib.error.URLError("no route")),
        )

        result = trigger.send()

        assert not result.success
        assert "no route" in result.message
