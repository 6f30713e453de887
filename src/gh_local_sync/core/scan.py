"""Directory scans used by the workflows.

Two scans on purpose: cloning checks every subfolder name, pulling only
looks at subfolders that hold a ``.git`` directory.
"""

import os
from pathlib import Path
from typing import List, Union

from ..domain.models import LocalRepositoryRef
from ..infra.logger import log_error

GIT_MARKER = ".git"

PathLike = Union[str, Path]


def _subdirectories(directory: PathLike) -> List[Path]:
    try:
        entries = [entry for entry in Path(directory).iterdir() if entry.is_dir()]
    except OSError as exc:
        log_error(f"Could not read directory {directory}: {exc}")
        return []
    return sorted(entries, key=lambda entry: entry.name.casefold())


def list_subfolder_names(directory: PathLike) -> List[str]:
    """Names of all immediate subdirectories, version-controlled or not."""
    return [entry.name for entry in _subdirectories(directory)]


def is_git_repo(path: PathLike) -> bool:
    return os.path.isdir(os.path.join(str(path), GIT_MARKER))


def list_local_repos(directory: PathLike) -> List[LocalRepositoryRef]:
    """Immediate subdirectories that contain a ``.git`` directory."""
    return [
        LocalRepositoryRef(name=entry.name, path=str(entry.resolve()))
        for entry in _subdirectories(directory)
        if is_git_repo(entry)
    ]
