"""Retry-or-skip handling for a batch's failed operations.

The coordinator is an explicit state machine::

    AWAITING_DECISION --retry--> RETRYING --all fixed--> RESOLVED
            ^                        |
            +------still failing-----+
    AWAITING_DECISION --skip--> SKIPPED

An empty failure set goes straight to RESOLVED.
"""

import enum
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from ..domain.models import OperationRequest, OperationResult
from ..infra.logger import log_error, log_info, log_success, log_warning
from .runner import run_operation

RETRY_ANSWERS = {"r", "retry"}
SKIP_ANSWERS = {"s", "skip"}
DECISION_PROMPT = "[R]etry all failed / [S]kip all: "


class RetryState(enum.Enum):
    AWAITING_DECISION = "awaiting_decision"
    RETRYING = "retrying"
    RESOLVED = "resolved"
    SKIPPED = "skipped"


TERMINAL_STATES = (RetryState.RESOLVED, RetryState.SKIPPED)


@dataclass
class RetryOutcome:
    state: RetryState
    unresolved: List[OperationResult] = field(default_factory=list)
    rounds: int = 0

    @property
    def unresolved_count(self) -> int:
        return len(self.unresolved)


def format_failure(position: int, result: OperationResult) -> List[str]:
    """Lines describing one failed operation in the retry listing."""
    reason = result.reason or "unknown"
    if result.exit_code is None:
        status = "not started"
    else:
        status = f"exit code {result.exit_code}"
    return [
        f"{position}. {result.identifier} [{reason}, {status}]",
        f"     command: {result.request.command_line}",
        f"     directory: {result.working_directory}",
    ]


class RetryCoordinator:
    """Offer retry/skip for failed operations until they succeed or are skipped.

    Args:
        runner: executes one request; retries create new results through it
        ask: reads the user's answer for a prompt (``input`` by default)
    """

    def __init__(
        self,
        runner: Callable[[OperationRequest], OperationResult] = run_operation,
        ask: Callable[[str], str] = input,
    ):
        self.runner = runner
        self.ask = ask
        self.state: Optional[RetryState] = None

    def resolve(self, failures: Sequence[OperationResult]) -> RetryOutcome:
        current = list(failures)
        rounds = 0
        self.state = RetryState.AWAITING_DECISION if current else RetryState.RESOLVED

        while self.state not in TERMINAL_STATES:
            if self.state is RetryState.AWAITING_DECISION:
                self._present(current)
                self.state = self._decide()
            elif self.state is RetryState.RETRYING:
                rounds += 1
                current = self._retry_round(current, rounds)
                self.state = RetryState.AWAITING_DECISION if current else RetryState.RESOLVED

        if self.state is RetryState.SKIPPED:
            log_warning(f"Finished processing, {len(current)} operation(s) left unresolved")
            return RetryOutcome(state=self.state, unresolved=current, rounds=rounds)

        if rounds:
            log_success("Finished processing, all failed operations recovered")
        return RetryOutcome(state=self.state, unresolved=[], rounds=rounds)

    def _present(self, current: List[OperationResult]) -> None:
        log_error(f"{len(current)} operation(s) failed:")
        for position, result in enumerate(current, start=1):
            for line in format_failure(position, result):
                print(line)

    def _decide(self) -> RetryState:
        # invalid answers are asked again and do not count as a round
        while True:
            answer = self.ask(DECISION_PROMPT).strip().lower()
            if answer in RETRY_ANSWERS:
                return RetryState.RETRYING
            if answer in SKIP_ANSWERS:
                return RetryState.SKIPPED
            log_warning(f"Please answer R or S (got '{answer}')")

    def _retry_round(self, current: List[OperationResult], round_number: int) -> List[OperationResult]:
        log_info(f"Retry round {round_number}: {len(current)} operation(s)")
        still_failing: List[OperationResult] = []
        for previous in current:
            result = self.runner(previous.request)
            if not result.success:
                still_failing.append(result)
        return still_failing
