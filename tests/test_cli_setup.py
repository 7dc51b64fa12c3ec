"""End-to-end tests for the app-setup command."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from appdeploy import __version__
from appdeploy.cli import setup_app

runner = CliRunner()


def _flags(project: Path, *extra: str) -> list[str]:
    return [
        "--project-path", str(project),
        "--domain", "example.com",
        "--frontend-port", "8080",
        "--backend-port", "8081",
        *extra,
    ]


class TestSetupCommand:
    def test_generates_artifacts_and_starts_containers(self, tmp_config, fake_shell, tmp_path: Path):
        project = tmp_path / "app"
        result = runner.invoke(setup_app, _flags(project, "--no-pm2"))

        assert result.exit_code == 0, result.output
        assert (project / "frontend" / "Dockerfile").is_file()
        assert (project / "backend" / "Dockerfile").is_file()
        assert '"8080:3000"' in (project / "docker-compose.yml").read_text()
        assert json.loads((project / "metadata.json").read_text()) == {
            "domain": "example.com",
            "frontendPort": "8080",
            "backendPort": "8081",
        }
        assert fake_shell.commands == ["docker-compose up -d"]
        assert fake_shell.cwds == [project]
        assert "App setup completed successfully!" in result.output

    def test_pm2_install(self, tmp_config, fake_shell, tmp_path: Path):
        result = runner.invoke(setup_app, _flags(tmp_path, "--pm2"))
        assert result.exit_code == 0, result.output
        assert fake_shell.commands == ["docker-compose up -d", "npm install -g pm2"]

    def test_best_effort_failures_still_succeed(self, tmp_config, fake_shell, tmp_path: Path):
        fake_shell.missing("docker-compose")
        fake_shell.fail("npm")
        result = runner.invoke(setup_app, _flags(tmp_path, "--pm2"))

        assert result.exit_code == 0, result.output
        assert "Error starting Docker containers" in result.output
        assert "Error installing PM2" in result.output
        assert "App setup completed successfully!" in result.output
        assert (tmp_path / "metadata.json").is_file()

    def test_prompts_for_missing_values(self, tmp_config, fake_shell, tmp_path: Path):
        project = tmp_path / "prompted"
        answers = f"{project}\nprompted.dev\n\n6000\ny\n"
        result = runner.invoke(setup_app, [], input=answers)

        assert result.exit_code == 0, result.output
        assert json.loads((project / "metadata.json").read_text()) == {
            "domain": "prompted.dev",
            "frontendPort": "3000",
            "backendPort": "6000",
        }
        assert "npm install -g pm2" in fake_shell.commands

    def test_empty_domain_allowed(self, tmp_config, fake_shell, tmp_path: Path):
        args = ["-p", str(tmp_path), "-f", "3000", "-b", "5000", "--no-pm2"]
        result = runner.invoke(setup_app, args, input="\n")
        assert result.exit_code == 0, result.output
        assert json.loads((tmp_path / "metadata.json").read_text())["domain"] == ""

    def test_file_generation_failure_is_fatal(self, tmp_config, fake_shell, tmp_path: Path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        result = runner.invoke(setup_app, _flags(blocker, "--no-pm2"))

        assert result.exit_code == 1
        assert "An error occurred" in result.output
        assert fake_shell.calls == []
        audit_line = json.loads(tmp_config.audit_jsonl_path.read_text())
        assert audit_line["result"] == "failure"

    def test_records_audit_event(self, tmp_config, fake_shell, tmp_path: Path):
        fake_shell.fail("docker-compose")
        runner.invoke(setup_app, _flags(tmp_path, "--no-pm2"))
        event = json.loads(tmp_config.audit_jsonl_path.read_text())
        assert event["action"] == "setup"
        assert event["result"] == "success"
        assert event["params"]["containers_started"] is False

    def test_version(self):
        result = runner.invoke(setup_app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_unwritable_audit_log_keeps_exit_zero(self, tmp_config, fake_shell, tmp_path: Path, monkeypatch):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        monkeypatch.setattr(tmp_config, "log_dir", blocker / "log")
        project = tmp_path / "app"

        result = runner.invoke(setup_app, _flags(project, "--no-pm2"))

        assert result.exit_code == 0, result.output
        assert "could not write audit log" in result.output
        assert "App setup completed successfully!" in result.output
        assert (project / "metadata.json").is_file()
