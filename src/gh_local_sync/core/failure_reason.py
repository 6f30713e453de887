"""Map captured git/gh output of a failed invocation to a short reason tag."""

REASON_PATTERNS = (
    ("not_git_repo", ("not a git repository",)),
    ("destination_exists", ("already exists and is not an empty directory",)),
    ("repo_not_found", ("could not resolve to a repository", "repository not found")),
    ("remote_ref_missing", ("couldn't find remote ref", "no such remote")),
    ("local_changes_conflict", ("your local changes", "would be overwritten")),
    ("unrelated_histories", ("refusing to merge unrelated histories",)),
    ("not_fast_forward", ("not possible to fast-forward", "cannot fast-forward")),
    ("no_upstream", ("no tracking information",)),
    ("network_error", ("could not resolve host", "failed to connect", "timed out")),
    ("auth_error", ("authentication failed", "permission denied")),
)


def extract_failure_reason(output: str) -> str:
    """Return the first matching reason tag, or ``unknown``."""
    text = (output or "").lower()
    if not text:
        return "unknown"
    for reason, needles in REASON_PATTERNS:
        if any(needle in text for needle in needles):
            return reason
    return "unknown"
