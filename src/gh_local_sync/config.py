# Runtime settings
#
# There is no settings file. Defaults can be overridden with environment
# variables:
#   GH_LOCAL_SYNC_DISPLAY_LIMIT   folders shown per page in the directory navigator
#   GH_LOCAL_SYNC_REPO_LIMIT      maximum repositories requested from gh repo list
#   GH_LOCAL_SYNC_START_DIR       directory the navigator starts in

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .infra.logger import log_warning

DISPLAY_LIMIT = 20
REPO_LIST_LIMIT = 1000

ENV_DISPLAY_LIMIT = "GH_LOCAL_SYNC_DISPLAY_LIMIT"
ENV_REPO_LIMIT = "GH_LOCAL_SYNC_REPO_LIMIT"
ENV_START_DIR = "GH_LOCAL_SYNC_START_DIR"


def _positive_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        log_warning(f"{key} must be an integer, using {default} (got '{raw}')")
        return default
    if value < 1:
        log_warning(f"{key} must be >= 1, using {default} (got {value})")
        return default
    return value


@dataclass(frozen=True)
class Settings:
    display_limit: int = DISPLAY_LIMIT
    repo_list_limit: int = REPO_LIST_LIMIT
    git_executable: str = "git"
    gh_executable: str = "gh"
    start_directory: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        start = Path.cwd()
        raw_start = env.get(ENV_START_DIR, "").strip()
        if raw_start:
            try:
                candidate = Path(raw_start).expanduser()
                resolved = candidate.resolve() if candidate.is_dir() else None
            except (OSError, RuntimeError, ValueError):
                resolved = None
            if resolved is not None:
                start = resolved
            else:
                log_warning(f"{ENV_START_DIR} is not a directory, starting in {start}")
        return cls(
            display_limit=_positive_int(env, ENV_DISPLAY_LIMIT, DISPLAY_LIMIT),
            repo_list_limit=_positive_int(env, ENV_REPO_LIMIT, REPO_LIST_LIMIT),
            start_directory=start,
        )
