# GitHub lookups through the gh CLI
#
# Functions:
#   - fetch_login(): login of the authenticated account, "" when not logged in
#   - fetch_organizations(): organizations the account belongs to
#   - fetch_repo_names(): "owner/name" for every repository of an owner
#
# Failures never raise: they are logged and come back as empty results.

import os
from typing import List

from ..core.runner import run
from .logger import log_error


def _gh(gh_executable: str, args: List[str], identifier: str):
    return run(gh_executable, args, os.getcwd(), identifier, quiet=True)


def _lines(output: str) -> List[str]:
    return [line.strip() for line in (output or "").splitlines() if line.strip()]


def fetch_login(gh_executable: str = "gh") -> str:
    result = _gh(gh_executable, ["api", "user", "--jq", ".login"], "gh-identity")
    if not result.success:
        return ""
    lines = _lines(result.output)
    return lines[0] if lines else ""


def fetch_organizations(gh_executable: str = "gh") -> List[str]:
    result = _gh(gh_executable, ["api", "user/orgs", "--jq", ".[].login"], "gh-organizations")
    if not result.success:
        return []
    return _lines(result.output)


def fetch_repo_names(owner: str, limit: int = 1000, gh_executable: str = "gh") -> List[str]:
    result = _gh(
        gh_executable,
        [
            "repo", "list", owner,
            "--limit", str(limit),
            "--json", "nameWithOwner",
            "--jq", ".[].nameWithOwner",
        ],
        f"gh-repo-list:{owner}",
    )
    if not result.success:
        detail = _lines(result.output)
        log_error(f"Could not list repositories of {owner}: {detail[-1] if detail else 'unknown error'}")
        return []
    return _lines(result.output)
