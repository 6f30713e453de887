# Interactive directory navigator
#
# Commands at the prompt:
#   <number>  enter the listed folder
#   ..        go to the parent folder
#   S         select the current folder
#   C         create a subfolder and enter it
#   > / <     next / previous page
#   P         type a path directly
#   Q         cancel
#
# The number of folders per page is passed in by the caller.

from pathlib import Path
from typing import Callable, List, Optional, Union

from ..infra.logger import log_error, log_success, log_warning

Ask = Callable[[str], str]


def list_visible_subdirectories(directory: Path) -> List[Path]:
    """Non-hidden subdirectories, case-insensitively sorted. Raises OSError."""
    entries = [
        entry for entry in directory.iterdir()
        if entry.is_dir() and not entry.name.startswith(".")
    ]
    return sorted(entries, key=lambda entry: entry.name.casefold())


def _render_page(current: Path, entries: List[Path], page: int, display_limit: int) -> None:
    pages = max(1, (len(entries) + display_limit - 1) // display_limit)
    start = page * display_limit
    print()
    print(f"Current directory: {current}")
    if not entries:
        print("  (no subfolders)")
    for offset, entry in enumerate(entries[start:start + display_limit]):
        print(f"  {start + offset + 1}. {entry.name}")
    if pages > 1:
        print(f"  page {page + 1}/{pages}, {len(entries)} folders")
    print("  [..] up  [S] select this folder  [C] create folder  [P] enter path  [Q] cancel")


def _create_subfolder(current: Path, ask: Ask) -> Optional[Path]:
    name = ask("New folder name: ").strip()
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        log_warning(f"Invalid folder name '{name}'")
        return None
    target = current / name
    try:
        target.mkdir(exist_ok=True)
    except (OSError, ValueError) as exc:
        log_error(f"Could not create {target}: {exc}")
        return None
    log_success(f"Created {target}")
    return target


def select_directory(
    start: Union[str, Path],
    display_limit: int,
    ask: Ask = input,
) -> Optional[Path]:
    """Let the user browse to a directory; returns its absolute path or None."""
    current = Path(start).expanduser().resolve()
    page = 0

    while True:
        try:
            entries = list_visible_subdirectories(current)
        except OSError as exc:
            log_error(f"Could not read {current}: {exc}")
            entries = []
        pages = max(1, (len(entries) + display_limit - 1) // display_limit)
        page = min(page, pages - 1)
        _render_page(current, entries, page, display_limit)

        answer = ask("> ").strip()
        command = answer.lower()

        if command == "q":
            return None
        if command == "s":
            return current
        if command == "..":
            current, page = current.parent, 0
        elif command == ">":
            if page + 1 < pages:
                page += 1
            else:
                log_warning("Already on the last page")
        elif command == "<":
            if page > 0:
                page -= 1
            else:
                log_warning("Already on the first page")
        elif command == "c":
            created = _create_subfolder(current, ask)
            if created is not None:
                current, page = created.resolve(), 0
        elif command == "p":
            raw_path = ask("Path: ").strip()
            try:
                typed = Path(raw_path).expanduser()
                if not typed.is_absolute():
                    typed = current / typed
                resolved = typed.resolve() if typed.is_dir() else None
            except (OSError, RuntimeError, ValueError):
                resolved = None
            if resolved is not None:
                current, page = resolved, 0
            else:
                log_warning(f"Not a directory: {raw_path}")
        elif command.isdecimal() and 1 <= int(command) <= len(entries):
            current, page = entries[int(command) - 1].resolve(), 0
        else:
            log_warning(f"Unknown command '{answer}'")
