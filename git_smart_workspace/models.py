"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class WorkspaceConfig:
    """Where the workspace lives and which host bare references point at."""

    root_dir: Path
    default_domain: str = "github.com"
    github_api_url: str = "https://api.github.com"

    @property
    def domain_root(self) -> Path:
        return self.root_dir / self.default_domain


@dataclass(frozen=True)
class RepoReference:
    """A repository resolved from user input."""

    remote_url: str
    domain: str
    owner: str
    name: str
    branch: str | None = None

    @classmethod
    def from_owner_name(
        cls,
        config: WorkspaceConfig,
        owner: str,
        name: str,
        branch: str | None = None,
    ) -> RepoReference:
        domain = config.default_domain
        return cls(
            remote_url=f"git@{domain}:{owner}/{name}.git",
            domain=domain,
            owner=owner,
            name=name,
            branch=branch,
        )

    @property
    def owner_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def repo_path(self, config: WorkspaceConfig) -> Path:
        return config.root_dir / self.domain / self.owner / self.name


@dataclass(frozen=True)
class TwoSegment:
    owner: str
    name: str


@dataclass(frozen=True)
class ThreeSegment:
    owner: str
    name: str
    branch: str


@dataclass(frozen=True)
class RemoteUrl:
    url: str
    domain: str
    owner: str
    name: str


@dataclass(frozen=True)
class Unsupported:
    """Input that has a recognizable shape the tool does not handle."""

    text: str
    reason: str


ParsedReference = TwoSegment | ThreeSegment | RemoteUrl | Unsupported
