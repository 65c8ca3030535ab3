"""Custom exception hierarchy for git-smart-workspace."""


class WorkspaceError(Exception):
    """Base error for all custom exceptions."""


class InvalidReferenceError(WorkspaceError):
    """Raised when the repository reference cannot be parsed."""


class MissingGitError(WorkspaceError):
    """Raised when the git executable is not available."""


class WorkspaceScanError(WorkspaceError):
    """Raised when the workspace tree cannot be walked."""


class WorkspaceCorruptionError(WorkspaceError):
    """Raised when the workspace tree is missing an expected directory."""


class RemoteLookupError(WorkspaceError):
    """Raised when a remote lookup fails or returns nothing usable."""


class AlreadyExistsError(WorkspaceError):
    """Raised when a clone target directory is already present."""


class GitCommandError(WorkspaceError):
    """Raised when a git invocation fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None):
        message = "Git command failed"
        if command:
            message = f"Git command failed: {' '.join(command)}"
        detail = (stderr or "").strip()
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
