# Batch execution module
#
# Functions:
#   - run_batch(): run operations one after another and split the results
#
# Every operation is attempted even after earlier ones failed. Results keep
# the input order inside each partition.

from typing import Callable, List, Optional, Sequence, Tuple

from ..domain.models import OperationRequest, OperationResult
from ..infra.logger import log_info, log_warning
from .runner import run_operation

Runner = Callable[[OperationRequest], OperationResult]
ProgressCallback = Callable[[int, int, int, int], None]


def run_batch(
    requests: Sequence[OperationRequest],
    runner: Runner = run_operation,
    progress_cb: Optional[ProgressCallback] = None,
) -> Tuple[List[OperationResult], List[OperationResult]]:
    """Run each request sequentially.

    Args:
        requests: operations in execution order
        runner: executes a single request (defaults to the process runner)
        progress_cb: called as (done, total, success, fail) before the first
            operation and after each one

    Returns:
        (successes, failures)
    """
    total = len(requests)
    successes: List[OperationResult] = []
    failures: List[OperationResult] = []

    if total == 0:
        log_warning("No operations to run")
        return successes, failures

    log_info(f"Starting batch of {total} operation(s)")
    if progress_cb:
        progress_cb(0, total, 0, 0)

    for position, request in enumerate(requests, start=1):
        log_info(f"[{position}/{total}] {request.identifier}")
        result = runner(request)
        if result.success:
            successes.append(result)
        else:
            failures.append(result)
        if progress_cb:
            progress_cb(position, total, len(successes), len(failures))

    log_info(f"Batch finished, success: {len(successes)}, fail: {len(failures)}")
    return successes, failures
