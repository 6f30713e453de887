"""Startup check for the external tools the workflows call."""

import shutil
from typing import Iterable, List

from .logger import log_error

INSTALL_HINTS = {
    "git": "https://git-scm.com/downloads",
    "gh": "https://cli.github.com/",
}


def missing_tools(executables: Iterable[str]) -> List[str]:
    return [name for name in executables if shutil.which(name) is None]


def check_prerequisites(executables: Iterable[str]) -> bool:
    """Log every missing tool; True when all of them are on PATH."""
    missing = missing_tools(executables)
    for name in missing:
        hint = INSTALL_HINTS.get(name)
        suffix = f" (install from {hint})" if hint else ""
        log_error(f"Required tool not found on PATH: {name}{suffix}")
    return not missing
