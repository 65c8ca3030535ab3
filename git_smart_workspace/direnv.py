"""Enable direnv for freshly created checkouts."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

ENVRC = ".envrc"


def allow_if_present(path: Path) -> bool:
    """Run ``direnv allow`` in ``path`` when it has an .envrc. Failures are logged."""

    if not (path / ENVRC).exists():
        return False
    logger.info("Enabling direnv in %s", path)
    try:
        proc = subprocess.run(
            ["direnv", "allow"],
            cwd=str(path),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.warning("Unable to allow direnv: %s", exc)
        return False
    if proc.returncode != 0:
        logger.warning("Unable to allow direnv: %s", proc.stderr.strip())
        return False
    return True
