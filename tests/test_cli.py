"""Tests for the command line entry point."""

from __future__ import annotations

import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from git_smart_workspace.cli import app
from git_smart_workspace.exceptions import AlreadyExistsError, InvalidReferenceError
from git_smart_workspace.models import WorkspaceConfig


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_prints_resolved_path(self) -> None:
        target = Path("/ws/github.com/octocat/Hello-World/main")
        with mock.patch("git_smart_workspace.cli.resolve", return_value=target) as resolve:
            result = self.runner.invoke(app, ["octocat/Hello-World", "--root", "/ws"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, f"{target}\n")
        config, reference = resolve.call_args.args
        self.assertEqual(config, WorkspaceConfig(root_dir=Path("/ws")))
        self.assertEqual(reference, "octocat/Hello-World")

    def test_domain_option(self) -> None:
        with mock.patch("git_smart_workspace.cli.resolve", return_value=Path("/x")) as resolve:
            result = self.runner.invoke(app, ["team/tool", "--root", "/ws", "--domain", "git.example.org"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(resolve.call_args.args[0].domain_root, Path("/ws/git.example.org"))

    def test_branch_option_is_accepted(self) -> None:
        with mock.patch("git_smart_workspace.cli.resolve", return_value=Path("/x")):
            result = self.runner.invoke(app, ["octocat/Hello-World", "--branch", "dev", "--root", "/ws"])

        self.assertEqual(result.exit_code, 0, result.output)

    def test_invalid_reference_exits_non_zero(self) -> None:
        error = InvalidReferenceError("Searching for repositories is not supported: 'not a repo ref'.")
        with mock.patch("git_smart_workspace.cli.resolve", side_effect=error):
            result = self.runner.invoke(app, ["not a repo ref", "--root", "/ws"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("not supported", result.output)

    def test_already_exists_exits_non_zero(self) -> None:
        with mock.patch("git_smart_workspace.cli.resolve", side_effect=AlreadyExistsError("Repo already exists: /ws")):
            result = self.runner.invoke(app, ["git@github.com:octocat/Hello-World.git", "--root", "/ws"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Repo already exists", result.output)

    def test_version(self) -> None:
        result = self.runner.invoke(app, ["--version"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("git-smart-workspace", result.stdout)


if __name__ == "__main__":
    unittest.main()
