"""Filesystem helpers for git-smart-workspace."""

from __future__ import annotations

import shutil
from pathlib import Path

from .exceptions import WorkspaceCorruptionError


def ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def missing_parents(path: Path) -> list[Path]:
    """Return ``path`` and its ancestors that do not exist yet, deepest first."""

    missing: list[Path] = []
    current = path
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent
    return missing


def remove_empty_dirs(paths: list[Path]) -> None:
    """Remove the given directories, deepest first, stopping at the first non-empty one."""

    for path in paths:
        try:
            path.rmdir()
        except FileNotFoundError:
            continue
        except OSError:
            break


def is_main_checkout(path: Path) -> bool:
    """A clone keeps a real ``.git`` directory, linked worktrees only a ``.git`` file."""

    return (path / ".git").is_dir()


def find_default_branch_dir(repo_dir: Path) -> Path:
    if repo_dir.is_dir():
        for child in sorted(repo_dir.iterdir()):
            if child.is_dir() and is_main_checkout(child):
                return child
    raise WorkspaceCorruptionError(
        f"Missing default branch checkout under {repo_dir}. Remove the directory and clone again."
    )


def copy_tree(source: Path, target: Path) -> None:
    shutil.copytree(source, target, symlinks=True)


def copy_file(source_root: Path, target_root: Path, relative: str) -> Path:
    """Copy ``relative`` from one checkout to the same place in another."""

    source = source_root / relative
    target = target_root / relative
    ensure_directory(target.parent)
    shutil.copy2(source, target, follow_symlinks=False)
    return target
