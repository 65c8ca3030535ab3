"""Classify user input into one of the supported repository reference shapes."""

from __future__ import annotations

import re

from .exceptions import InvalidReferenceError
from .models import (
    ParsedReference,
    RemoteUrl,
    RepoReference,
    ThreeSegment,
    TwoSegment,
    Unsupported,
    WorkspaceConfig,
)

_SEGMENT = r"(?!\.\.?(?:/|\Z))[A-Za-z0-9_.-]+"
_TWO_SEGMENT_RE = re.compile(rf"\A({_SEGMENT})/({_SEGMENT})\Z")
_THREE_SEGMENT_RE = re.compile(rf"\A({_SEGMENT})/({_SEGMENT})/({_SEGMENT})\Z")
_GIT_REMOTE_RE = re.compile(r"\Agit(?:ea)?@(?P<host>[^:/\s]+):(?P<path>\S+?)(?:\.git)?/?\Z")


def classify(text: str) -> ParsedReference:
    """Return the parsed shape of ``text``.

    Raises InvalidReferenceError when the input looks like a reference
    (contains a path separator or a git remote prefix) but breaks the
    segment count or the allowed character set. Segments may not be
    "." or "..", which would step outside the owner/repo/branch layout.
    """

    value = text.strip()
    if match := _TWO_SEGMENT_RE.match(value):
        return TwoSegment(owner=match.group(1), name=match.group(2))
    if match := _THREE_SEGMENT_RE.match(value):
        return ThreeSegment(owner=match.group(1), name=match.group(2), branch=match.group(3))
    if match := _GIT_REMOTE_RE.match(value):
        path_match = _TWO_SEGMENT_RE.match(match.group("path"))
        if not path_match:
            raise InvalidReferenceError(
                f"Remote URL must look like git@<host>:<owner>/<repo>.git, got: {value}"
            )
        return RemoteUrl(
            url=value,
            domain=match.group("host"),
            owner=path_match.group(1),
            name=path_match.group(2),
        )
    if "://" in value:
        return Unsupported(text=value, reason="url")
    if "/" in value:
        raise InvalidReferenceError(
            f"Invalid reference '{value}'. Use owner/repo or owner/repo/branch "
            "with letters, digits, '.', '_' or '-' (a segment cannot be '.' or '..')."
        )
    return Unsupported(text=value, reason="search")


def to_reference(parsed: ParsedReference, config: WorkspaceConfig) -> RepoReference:
    if isinstance(parsed, TwoSegment):
        return RepoReference.from_owner_name(config, parsed.owner, parsed.name)
    if isinstance(parsed, ThreeSegment):
        return RepoReference.from_owner_name(config, parsed.owner, parsed.name, parsed.branch)
    if isinstance(parsed, RemoteUrl):
        return RepoReference(
            remote_url=parsed.url,
            domain=parsed.domain,
            owner=parsed.owner,
            name=parsed.name,
        )
    raise InvalidReferenceError(unsupported_message(parsed))


def unsupported_message(parsed: Unsupported) -> str:
    if parsed.reason == "url":
        return f"URL references are not supported: {parsed.text}. Use git@<host>:<owner>/<repo>.git instead."
    return f"Searching for repositories is not supported: '{parsed.text}'. Use owner/repo."
