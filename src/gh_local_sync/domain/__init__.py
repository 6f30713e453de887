"""Domain models, missing-repository resolution and selection parsing."""

from .models import (
    CandidateEntry,
    LocalRepositoryRef,
    OperationRequest,
    OperationResult,
    RemoteRepositoryRef,
)
from .resolver import missing

__all__ = [
    "CandidateEntry",
    "LocalRepositoryRef",
    "OperationRequest",
    "OperationResult",
    "RemoteRepositoryRef",
    "missing",
]
