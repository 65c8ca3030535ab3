"""Build the workspace configuration once at process start."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from .models import WorkspaceConfig

ROOT_ENV = "GIT_WORKSPACE_ROOT"
DOMAIN_ENV = "GIT_WORKSPACE_DOMAIN"
GITHUB_API_ENV = "GIT_WORKSPACE_GITHUB_API"

DEFAULT_DOMAIN = "github.com"
DEFAULT_GITHUB_API = "https://api.github.com"


def load_config(
    root: Path | None = None,
    domain: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> WorkspaceConfig:
    """Explicit arguments win over environment variables, which win over defaults."""

    env = os.environ if environ is None else environ
    root_dir = root or _env_path(env, ROOT_ENV) or default_root()
    return WorkspaceConfig(
        root_dir=root_dir.expanduser().absolute(),
        default_domain=domain or env.get(DOMAIN_ENV) or DEFAULT_DOMAIN,
        github_api_url=env.get(GITHUB_API_ENV) or DEFAULT_GITHUB_API,
    )


def default_root() -> Path:
    return Path.home() / "code"


def _env_path(env: Mapping[str, str], var: str) -> Path | None:
    raw = env.get(var)
    if not raw:
        return None
    return Path(raw)
