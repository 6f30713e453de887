"""Work out which remote repositories are not yet present in a local directory."""

from typing import Iterable, List

from .models import CandidateEntry, RemoteRepositoryRef


def missing(remote_names: Iterable[str], local_folder_names: Iterable[str]) -> List[CandidateEntry]:
    """Return candidates whose folder name is absent from ``local_folder_names``.

    A clone of ``owner/name`` lands in folder ``name``. ``local_folder_names``
    should hold every immediate subfolder of the target directory,
    version-controlled or not: a plain folder with the same name would make
    the clone fail, so it blocks the candidate as well. Matching is
    case-insensitive and the remote ordering is preserved.
    """
    existing = {name.casefold() for name in local_folder_names}
    candidates: List[CandidateEntry] = []
    for full_name in remote_names:
        remote = RemoteRepositoryRef(full_name)
        if remote.name.casefold() in existing:
            continue
        candidates.append(
            CandidateEntry(remote=remote, folder_name=remote.name, index=len(candidates) + 1)
        )
    return candidates
