"""Clone-missing and pull-all workflows.

Both return a summary dict once operations ran, or None when the workflow
stopped early (cancelled, nothing to do, discovery failed).
"""

import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..config import Settings
from ..core.batch import run_batch
from ..core.requests import clone_requests, pull_requests
from ..core.retry import RetryCoordinator, RetryState
from ..core.runner import run_operation
from ..core.scan import list_local_repos, list_subfolder_names
from ..domain.models import OperationRequest, OperationResult
from ..domain.resolver import missing
from ..infra.github import fetch_login, fetch_organizations, fetch_repo_names
from ..infra.logger import log_error, log_info, log_success, log_warning
from ..ui.navigator import select_directory
from ..ui.prompts import choose_one, confirm, select_candidates

Ask = Callable[[str], str]
Runner = Callable[[OperationRequest], OperationResult]


def print_summary(title: str, summary: Dict[str, int]) -> None:
    duration = summary["duration"]
    minutes, seconds = divmod(duration, 60)
    print()
    log_info(f"========== {title} finished ==========")
    log_info(f"Total: {summary['total']}")
    log_success(f"Succeeded: {summary['success']}")
    if summary["fail"]:
        log_warning(f"Failed in first pass: {summary['fail']}, recovered by retry: {summary['recovered']}")
    if summary["unresolved"]:
        log_error(f"Unresolved: {summary['unresolved']}")
    log_info(f"Duration: {minutes}m {seconds}s")
    log_info("=" * (len(title) + 31))


def _progress_logger(title: str) -> Callable[[int, int, int, int], None]:
    def log_progress(done: int, total: int, success: int, fail: int) -> None:
        if done:
            log_info(f"[{title}] progress {done}/{total}, success {success}, fail {fail}")

    return log_progress


def _execute(title: str, requests: List[OperationRequest], runner: Runner, ask: Ask) -> Dict[str, int]:
    start_time = time.time()
    successes, failures = run_batch(requests, runner=runner, progress_cb=_progress_logger(title))
    outcome = RetryCoordinator(runner=runner, ask=ask).resolve(failures)
    unresolved = outcome.unresolved_count if outcome.state is RetryState.SKIPPED else 0
    summary = {
        "total": len(requests),
        "success": len(requests) - unresolved,
        "fail": len(failures),
        "recovered": len(failures) - unresolved,
        "unresolved": unresolved,
        "duration": int(time.time() - start_time),
    }
    print_summary(title, summary)
    return summary


def resolve_owner(settings: Settings, ask: Ask = input) -> Optional[str]:
    """Authenticated login, or one of its organizations when it has any."""
    while True:
        login = fetch_login(settings.gh_executable)
        if login:
            break
        log_error("gh is not authenticated. Run 'gh auth login' in another terminal.")
        answer = ask("[R] check again / [M] back to menu: ").strip().lower()
        if answer != "r":
            return None

    log_info(f"Authenticated as {login}")
    organizations = fetch_organizations(settings.gh_executable)
    if not organizations:
        return login
    return choose_one("Whose repositories should be cloned?", [login, *organizations], ask)


def _choose_directory(settings: Settings, ask: Ask) -> Optional[Path]:
    target = select_directory(settings.start_directory, settings.display_limit, ask)
    if target is None:
        log_info("Directory selection cancelled")
    return target


def clone_missing(settings: Settings, ask: Ask = input, runner: Runner = run_operation) -> Optional[Dict[str, int]]:
    owner = resolve_owner(settings, ask)
    if not owner:
        log_info("Back to menu")
        return None

    target = _choose_directory(settings, ask)
    if target is None:
        return None

    log_info(f"Listing repositories of {owner}...")
    remote_names = fetch_repo_names(owner, settings.repo_list_limit, settings.gh_executable)
    if not remote_names:
        log_warning(f"No repositories found for {owner}")
        return None

    candidates = missing(remote_names, list_subfolder_names(target))
    if not candidates:
        log_success(f"All {len(remote_names)} repositories of {owner} are already in {target}")
        return None

    selected = select_candidates(candidates, ask)
    if not selected:
        log_info("Selection cancelled")
        return None

    if not confirm(f"Clone {len(selected)} repositories into {target}?", ask):
        log_info("Clone cancelled")
        return None

    requests = clone_requests(selected, target, settings.gh_executable)
    return _execute("Clone", requests, runner, ask)


def pull_all(settings: Settings, ask: Ask = input, runner: Runner = run_operation) -> Optional[Dict[str, int]]:
    target = _choose_directory(settings, ask)
    if target is None:
        return None

    repos = list_local_repos(target)
    if not repos:
        log_error(f"No git repositories found directly under {target}")
        return None

    log_info(f"Found {len(repos)} repositories under {target}")
    requests = pull_requests(repos, settings.git_executable)
    return _execute("Pull", requests, runner, ask)
