"""Clone repositories and add branch worktrees inside the workspace tree."""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from . import direnv, fs, git
from .exceptions import AlreadyExistsError, GitCommandError, RemoteLookupError
from .models import RepoReference, WorkspaceConfig

logger = logging.getLogger(__name__)

NODE_MODULES = "node_modules"


@dataclass
class WorkspaceService:
    config: WorkspaceConfig

    def clone_repo(self, ref: RepoReference) -> Path:
        """Clone ``ref`` into ``owner/repo/<default-branch>`` and return that path."""

        repo_dir = ref.repo_path(self.config)
        if repo_dir.exists():
            raise AlreadyExistsError(f"Repo already exists: {repo_dir}")
        git.ensure_installed()

        logger.info("Creating: %s", repo_dir)
        created = fs.missing_parents(repo_dir)
        fs.ensure_directory(repo_dir)
        try:
            default_branch = git.remote_default_branch(ref.remote_url)
            if not default_branch:
                raise RemoteLookupError(f"Unable to get default branch of repository: {ref.remote_url}")
            branch_dir = repo_dir / default_branch
            logger.info("Cloning into: %s", branch_dir)
            git.clone(ref.remote_url, branch_dir)
        except (GitCommandError, RemoteLookupError):
            fs.remove_empty_dirs(created)
            raise

        direnv.allow_if_present(branch_dir)
        return branch_dir.absolute()

    def checkout_branch(self, ref: RepoReference, branch: str) -> Path:
        """Return the worktree for ``branch``, creating it next to the default branch if needed."""

        repo_dir = ref.repo_path(self.config)
        if not repo_dir.exists():
            self.clone_repo(ref)

        branch_dir = repo_dir / branch
        if branch_dir.exists():
            logger.warning("Branch directory already exists: %s", branch_dir)
            return branch_dir.absolute()

        git.ensure_installed()
        main_dir = fs.find_default_branch_dir(repo_dir)

        logger.info("Pulling repository in %s", main_dir)
        try:
            git.pull(main_dir)
        except GitCommandError as exc:
            logger.warning("Unable to pull %s: %s", main_dir, exc.stderr.strip() or exc)

        if branch in git.remote_branches(main_dir):
            logger.info("Checking out remote branch: %s", branch)
            git.worktree_add_tracking(main_dir, branch_dir, branch)
        else:
            logger.info("Checking out new branch: %s", branch)
            git.worktree_add_new(main_dir, branch_dir, branch)

        self.propagate_local_state(main_dir, branch_dir)
        direnv.allow_if_present(branch_dir)
        return branch_dir.absolute()

    def propagate_local_state(self, source: Path, target: Path) -> None:
        """Carry node_modules, untracked files and assume-unchanged files into a new worktree."""

        self._copy_node_modules(source, target)
        self._copy_untracked(source, target)
        self._copy_assume_unchanged(source, target)

    def _copy_node_modules(self, source: Path, target: Path) -> None:
        node_modules = source / NODE_MODULES
        if not node_modules.is_dir():
            return
        logger.info("Copying %s", NODE_MODULES)
        try:
            fs.copy_tree(node_modules, target / NODE_MODULES)
        except (OSError, shutil.Error) as exc:
            logger.warning("Unable to copy node_modules: %s", exc)

    def _copy_untracked(self, source: Path, target: Path) -> None:
        try:
            files = git.untracked_files(source)
        except GitCommandError as exc:
            logger.warning("Unable to list untracked files: %s", exc)
            return
        copied = 0
        for relative in files:
            if Path(relative).parts[:1] == (NODE_MODULES,):
                continue
            if os.path.lexists(target / relative):
                logger.debug("Skipping untracked file %s: already present in %s", relative, target)
                continue
            try:
                fs.copy_file(source, target, relative)
            except OSError as exc:
                logger.debug("Skipping untracked file %s: %s", relative, exc)
                continue
            copied += 1
        if copied:
            logger.info("Copied %d untracked file(s)", copied)

    def _copy_assume_unchanged(self, source: Path, target: Path) -> None:
        try:
            files = git.assume_unchanged_files(source)
        except GitCommandError as exc:
            logger.warning("Unable to list assume-unchanged files: %s", exc)
            return
        for relative in files:
            try:
                fs.copy_file(source, target, relative)
                git.mark_assume_unchanged(target, relative)
            except (OSError, GitCommandError) as exc:
                logger.warning("Unable to carry over %s: %s", relative, exc)
                continue
            logger.info("Carried over assume-unchanged file: %s", relative)
