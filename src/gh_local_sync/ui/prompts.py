"""Text prompts: single choice, yes/no confirmation and candidate multi-select."""

from typing import Callable, List, Optional, Sequence

from ..domain.models import CandidateEntry
from ..domain.selection import parse
from ..infra.logger import log_warning

Ask = Callable[[str], str]

AFFIRMATIVE_ANSWERS = {"y", "yes"}


def choose_one(title: str, options: Sequence[str], ask: Ask = input) -> Optional[str]:
    """Pick one of ``options`` by number; None when the user enters Q."""
    if not options:
        return None
    print()
    print(title)
    for position, option in enumerate(options, start=1):
        print(f"  {position}. {option}")
    while True:
        answer = ask(f"Choose 1-{len(options)} or Q to cancel: ").strip()
        if answer.lower() == "q":
            return None
        if answer.isdecimal() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        log_warning(f"Invalid choice '{answer}'")


def confirm(message: str, ask: Ask = input) -> bool:
    answer = ask(f"{message} [y/N]: ").strip().lower()
    return answer in AFFIRMATIVE_ANSWERS


def render_candidates(candidates: Sequence[CandidateEntry]) -> None:
    width = len(str(len(candidates)))
    for candidate in candidates:
        print(f"  {str(candidate.index).rjust(width)}. {candidate.full_name}")


def select_candidates(candidates: Sequence[CandidateEntry], ask: Ask = input) -> Optional[List[CandidateEntry]]:
    """Multi-select over ``candidates``; None when cancelled.

    Indices are looked up by position in this list, so they are only valid
    for this prompt.
    """
    print()
    print(f"{len(candidates)} repositories are not present locally:")
    render_candidates(candidates)
    while True:
        expression = ask("Select (e.g. 1,3,5-7), A for all, Q to cancel: ")
        indices = parse(expression, len(candidates))
        if indices is None:
            return None
        if not indices:
            log_warning("Nothing selected, try again")
            continue
        return [candidates[index - 1] for index in indices]
