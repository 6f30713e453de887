"""Build the clone and pull operations handed to the batch executor."""

from pathlib import Path
from typing import Iterable, List, Union

from ..domain.models import CandidateEntry, LocalRepositoryRef, OperationRequest

PULL_ARGS = ("pull", "--ff-only")


def clone_request(candidate: CandidateEntry, target_directory: Union[str, Path], gh_executable: str = "gh") -> OperationRequest:
    """``gh repo clone owner/name`` run from the target parent directory.

    gh creates the destination subfolder itself.
    """
    return OperationRequest(
        executable=gh_executable,
        args=("repo", "clone", candidate.full_name),
        working_directory=str(target_directory),
        identifier=candidate.full_name,
    )


def pull_request(repo: LocalRepositoryRef, git_executable: str = "git") -> OperationRequest:
    """Fast-forward-only pull run inside the repository itself."""
    return OperationRequest(
        executable=git_executable,
        args=PULL_ARGS,
        working_directory=repo.path,
        identifier=repo.name,
    )


def clone_requests(
    candidates: Iterable[CandidateEntry],
    target_directory: Union[str, Path],
    gh_executable: str = "gh",
) -> List[OperationRequest]:
    return [clone_request(candidate, target_directory, gh_executable) for candidate in candidates]


def pull_requests(repos: Iterable[LocalRepositoryRef], git_executable: str = "git") -> List[OperationRequest]:
    return [pull_request(repo, git_executable) for repo in repos]
