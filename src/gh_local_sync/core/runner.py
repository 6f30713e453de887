"""Run one external command and capture its combined output and exit status.

The command's working directory is handed to the child process (``cwd=``);
this process's own working directory is never changed. Every outcome,
including a command that cannot be started, comes back as an
``OperationResult``; nothing is raised to the caller.
"""

import os
import subprocess
from typing import Sequence

from ..domain.models import OperationRequest, OperationResult
from ..infra.logger import log_error, log_info, log_success
from .failure_reason import extract_failure_reason

# exit code of a result whose process never ran
EXIT_CODE_NOT_STARTED = None


def _not_started(request: OperationRequest, message: str, quiet: bool) -> OperationResult:
    if not quiet:
        log_error(f"{request.identifier}: {message}")
    return OperationResult(
        request=request,
        success=False,
        output=message,
        exit_code=EXIT_CODE_NOT_STARTED,
        reason="not_started",
    )


def run_operation(request: OperationRequest, quiet: bool = False) -> OperationResult:
    """Execute ``request`` and block until the process exits."""
    if not os.path.isdir(request.working_directory):
        return _not_started(
            request,
            f"could not enter working directory: {request.working_directory}",
            quiet,
        )

    if not quiet:
        log_info(f"{request.identifier}: {request.command_line} (in {request.working_directory})")

    try:
        completed = subprocess.run(
            list(request.argv),
            cwd=request.working_directory,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        return _not_started(request, f"could not start {request.executable}: {exc}", quiet)
    except Exception as exc:
        return _not_started(request, f"unexpected error running {request.executable}: {exc}", quiet)

    output = completed.stdout or ""
    if completed.returncode == 0:
        if not quiet:
            log_success(f"{request.identifier}: done")
        return OperationResult(request=request, success=True, output=output, exit_code=0)

    reason = extract_failure_reason(output)
    if not quiet:
        log_error(f"{request.identifier}: exited with code {completed.returncode} [{reason}]")
    return OperationResult(
        request=request,
        success=False,
        output=output,
        exit_code=completed.returncode,
        reason=reason,
    )


def run(
    executable: str,
    args: Sequence[str],
    working_directory: str,
    identifier: str,
    quiet: bool = False,
) -> OperationResult:
    """Convenience form of :func:`run_operation` taking the request fields directly."""
    request = OperationRequest(
        executable=executable,
        args=tuple(args),
        working_directory=str(working_directory),
        identifier=identifier,
    )
    return run_operation(request, quiet=quiet)
