# Console logging module: uniform, timestamped, color-coded output
#
# Functions:
#   - log_info(): informational line (stdout)
#   - log_success(): success line (stdout)
#   - log_warning(): warning line (stdout)
#   - log_error(): error line (stderr)
#
# Colors come from colorama and are only used when the target stream is a terminal.

import sys
from datetime import datetime

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

COLOR_INFO = Fore.CYAN
COLOR_SUCCESS = Fore.GREEN
COLOR_ERROR = Fore.RED
COLOR_WARNING = Fore.YELLOW


def _get_timestamp() -> str:
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def _format_message(level: str, color: str, message: str, stream) -> str:
    timestamp = _get_timestamp()
    if stream.isatty():
        return f"{color}[{level}]{Style.RESET_ALL} [{timestamp}] {message}"
    return f"[{level}] [{timestamp}] {message}"


def _emit(level: str, color: str, message: str, stream=None) -> None:
    stream = stream or sys.stdout
    print(_format_message(level, color, message, stream), file=stream)


def log_info(message: str) -> None:
    _emit("INFO", COLOR_INFO, message)


def log_success(message: str) -> None:
    _emit("SUCCESS", COLOR_SUCCESS, message)


def log_error(message: str) -> None:
    """Errors go to stderr."""
    _emit("ERROR", COLOR_ERROR, message, stream=sys.stderr)


def log_warning(message: str) -> None:
    _emit("WARNING", COLOR_WARNING, message)
