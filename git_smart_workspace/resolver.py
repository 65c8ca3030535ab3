"""Decide whether a reference maps to an existing directory, a clone, or a new worktree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from . import fs, github
from .exceptions import InvalidReferenceError, RemoteLookupError
from .index import WorkspaceIndex
from .models import ParsedReference, RemoteUrl, RepoReference, ThreeSegment, TwoSegment, Unsupported, WorkspaceConfig
from .reference import classify, to_reference, unsupported_message
from .workspace import WorkspaceService

logger = logging.getLogger(__name__)


@dataclass
class Resolver:
    """Resolve user input against one snapshot of the workspace tree.

    Existing directories always win over network or git work. When several
    directories match, the first one in walk order is used.
    """

    config: WorkspaceConfig
    service: WorkspaceService
    index: WorkspaceIndex

    def resolve(self, text: str) -> Path:
        return self.resolve_parsed(classify(text))

    def resolve_parsed(self, parsed: ParsedReference) -> Path:
        if isinstance(parsed, TwoSegment):
            return self.resolve_owner_name(parsed)
        if isinstance(parsed, ThreeSegment):
            return self.resolve_owner_name_branch(parsed)
        if isinstance(parsed, RemoteUrl):
            return self.service.clone_repo(to_reference(parsed, self.config))
        if isinstance(parsed, Unsupported):
            raise InvalidReferenceError(unsupported_message(parsed))
        raise InvalidReferenceError(f"Unrecognized reference: {parsed!r}")  # pragma: no cover

    def resolve_owner_name(self, parsed: TwoSegment) -> Path:
        owner_dirs = self.index.owner_repo_dirs(parsed.owner)
        if not owner_dirs:
            return self._resolve_repo_branch(parsed)

        repo_dirs = [path for path in owner_dirs if path.name == parsed.name]
        if not repo_dirs:
            logger.info("Owner exists, repo does not.")
            return self.service.clone_repo(to_reference(parsed, self.config))
        return fs.find_default_branch_dir(repo_dirs[0]).absolute()

    def _resolve_repo_branch(self, parsed: TwoSegment) -> Path:
        """Read ``repo/branch`` for a repo already cloned under some owner, else clone ``owner/repo``."""

        repo_dirs = self.index.repo_dirs_named(parsed.owner)
        if not repo_dirs:
            if not github.user_exists(parsed.owner, api_url=self.config.github_api_url):
                raise RemoteLookupError(f"Unable to checkout repo - cannot find user: {parsed.owner}")
            return self.service.clone_repo(to_reference(parsed, self.config))

        repo_dir = repo_dirs[0]
        branch = parsed.name
        branch_dirs = self.index.branch_dirs_named(branch, within=[repo_dir])
        if branch_dirs:
            return branch_dirs[0].absolute()
        ref = RepoReference.from_owner_name(self.config, repo_dir.parent.name, repo_dir.name, branch)
        return self.service.checkout_branch(ref, branch)

    def resolve_owner_name_branch(self, parsed: ThreeSegment) -> Path:
        ref = to_reference(parsed, self.config)
        repo_dirs = [path for path in self.index.owner_repo_dirs(parsed.owner) if path.name == parsed.name]
        if not repo_dirs:
            return self.service.checkout_branch(ref, parsed.branch)

        branch_dirs = self.index.branch_dirs_named(parsed.branch, within=repo_dirs[:1])
        if not branch_dirs:
            return self.service.checkout_branch(ref, parsed.branch)
        return branch_dirs[0].absolute()


def resolve(config: WorkspaceConfig, text: str) -> Path:
    """Resolve ``text`` against a fresh scan of the configured workspace."""

    parsed = classify(text)
    index = WorkspaceIndex.scan(config.domain_root)
    return Resolver(config=config, service=WorkspaceService(config), index=index).resolve_parsed(parsed)
