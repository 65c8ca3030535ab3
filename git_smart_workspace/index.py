"""Snapshot of the owner/repo/branch directories under a domain root."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .exceptions import WorkspaceScanError


@dataclass(frozen=True)
class WorkspaceIndex:
    """Directories at depth 2 (owner/repo) and depth 3 (owner/repo/branch).

    Entries keep walk order, which is sorted by name at every level, so
    "first match" is stable between runs over the same tree.
    """

    domain_root: Path
    repo_dirs: tuple[Path, ...] = ()
    branch_dirs: tuple[Path, ...] = ()

    @classmethod
    def scan(cls, domain_root: Path) -> WorkspaceIndex:
        if not domain_root.exists():
            return cls(domain_root=domain_root)
        repo_dirs: list[Path] = []
        branch_dirs: list[Path] = []
        try:
            for owner_dir in _subdirectories(domain_root):
                for repo_dir in _subdirectories(owner_dir):
                    repo_dirs.append(repo_dir)
                    branch_dirs.extend(_subdirectories(repo_dir))
        except OSError as exc:
            raise WorkspaceScanError(f"Unable to scan workspace at {domain_root}: {exc}") from exc
        return cls(domain_root=domain_root, repo_dirs=tuple(repo_dirs), branch_dirs=tuple(branch_dirs))

    def owner_repo_dirs(self, owner: str) -> list[Path]:
        return [path for path in self.repo_dirs if path.parent.name == owner]

    def repo_dirs_named(self, name: str) -> list[Path]:
        return [path for path in self.repo_dirs if path.name == name]

    def branch_dirs_named(self, branch: str, within: Iterable[Path]) -> list[Path]:
        parents = set(within)
        return [path for path in self.branch_dirs if path.name == branch and path.parent in parents]


def _subdirectories(path: Path) -> list[Path]:
    return sorted(child for child in path.iterdir() if child.is_dir() and not child.is_symlink())
