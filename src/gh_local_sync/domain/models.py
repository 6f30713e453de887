"""Domain data structures."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class OperationRequest:
    """A single external invocation: executable, argument vector and working directory."""

    executable: str
    args: Tuple[str, ...]
    working_directory: str
    identifier: str

    def __post_init__(self) -> None:
        if not self.identifier or not self.identifier.strip():
            raise ValueError("OperationRequest identifier must not be empty")
        # accept any sequence but store an immutable tuple
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "working_directory", str(self.working_directory))

    @property
    def argv(self) -> Tuple[str, ...]:
        return (self.executable, *self.args)

    @property
    def command_line(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one execution attempt of an OperationRequest.

    A retry produces a new instance; results are never updated in place.
    ``exit_code`` is None when the process never started.
    """

    request: OperationRequest
    success: bool
    output: str = ""
    exit_code: Optional[int] = 0
    reason: str = ""

    @property
    def identifier(self) -> str:
        return self.request.identifier

    @property
    def working_directory(self) -> str:
        return self.request.working_directory


@dataclass(frozen=True)
class RemoteRepositoryRef:
    """A hosted repository addressed as ``owner/name``."""

    full_name: str

    @property
    def name(self) -> str:
        return self.full_name.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class LocalRepositoryRef:
    name: str
    path: str


@dataclass(frozen=True)
class CandidateEntry:
    """A remote repository eligible for cloning.

    ``index`` is the 1-based position shown in one selection prompt and is
    only meaningful for that prompt.
    """

    remote: RemoteRepositoryRef
    folder_name: str
    index: int = field(default=0)

    @property
    def full_name(self) -> str:
        return self.remote.full_name
