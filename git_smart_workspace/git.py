"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Iterable

from .exceptions import GitCommandError, MissingGitError

logger = logging.getLogger(__name__)

REMOTE = "origin"
ASSUME_UNCHANGED_TAG = "h"


def run_git(
    args: Iterable[str],
    *,
    cwd: Path | None = None,
    raise_on_error: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    cmd = ["git", *args]
    logger.debug("Running: %s (cwd=%s)", " ".join(cmd), cwd or ".")
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise MissingGitError("Unable to execute command: \"git\". Is git installed?") from exc
    if raise_on_error and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr)
    return proc


def ensure_installed() -> None:
    if shutil.which("git") is None:
        raise MissingGitError("Unable to execute command: \"git\". Is git installed?")


def remote_default_branch(url: str) -> str | None:
    """Ask the remote which branch its HEAD points at."""

    proc = run_git(["ls-remote", "--symref", url, "HEAD"])
    return parse_symref_head(proc.stdout)


def parse_symref_head(output: str) -> str | None:
    for raw in output.splitlines():
        line = raw.strip()
        if not line.startswith("ref:"):
            continue
        ref, _, target = line[len("ref:") :].strip().partition("\t")
        if target.strip() != "HEAD":
            continue
        prefix = "refs/heads/"
        if ref.startswith(prefix):
            return ref[len(prefix) :]
        return ref or None
    return None


def clone(url: str, target: Path) -> None:
    run_git(["clone", url, str(target)], cwd=target.parent)


def pull(path: Path) -> None:
    run_git(["pull"], cwd=path)


def remote_branches(path: Path) -> list[str]:
    proc = run_git(["branch", "-r"], cwd=path)
    return parse_remote_branches(proc.stdout)


def parse_remote_branches(output: str, remote: str = REMOTE) -> list[str]:
    prefix = f"{remote}/"
    names: list[str] = []
    for raw in output.splitlines():
        line = raw.strip()
        if not line or line.startswith(f"{prefix}HEAD -> "):
            continue
        if line.startswith(prefix):
            line = line[len(prefix) :]
        names.append(line)
    return names


def worktree_add_tracking(path: Path, target: Path, branch: str) -> None:
    run_git(["worktree", "add", str(target), branch], cwd=path)


def worktree_add_new(path: Path, target: Path, branch: str) -> None:
    run_git(["worktree", "add", "-b", branch, str(target)], cwd=path)


def untracked_files(path: Path) -> list[str]:
    proc = run_git(["ls-files", "-o", "-z"], cwd=path)
    return [entry for entry in proc.stdout.split("\0") if entry]


def assume_unchanged_files(path: Path) -> list[str]:
    proc = run_git(["ls-files", "-v", "-z"], cwd=path)
    return parse_assume_unchanged(proc.stdout)


def parse_assume_unchanged(output: str) -> list[str]:
    files: list[str] = []
    for entry in output.split("\0"):
        if len(entry) > 2 and entry.startswith(f"{ASSUME_UNCHANGED_TAG} "):
            files.append(entry[2:])
    return files


def mark_assume_unchanged(path: Path, relative: str) -> None:
    run_git(["add", "--intent-to-add", "--", relative], cwd=path)
    run_git(["update-index", "--skip-worktree", "--assume-unchanged", "--", relative], cwd=path)
