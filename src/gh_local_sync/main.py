#!/usr/bin/env python3
# gh-local-sync: keep a local folder in step with your GitHub repositories
#
# Menu:
#   1  clone repositories that are missing locally
#   2  pull (fast-forward only) every repository in a folder
#   Q  quit
#
# git and gh must be on PATH; without them the tool exits before the menu.

import sys
from typing import Callable

from .application.workflows import clone_missing, pull_all
from .config import Settings
from .infra.logger import log_info, log_warning
from .infra.prerequisites import check_prerequisites

MENU = """
========== gh-local-sync ==========
  1. Clone missing repositories
  2. Pull all local repositories
  Q. Quit"""


def menu_loop(settings: Settings, ask: Callable[[str], str] = input) -> None:
    workflows = {"1": clone_missing, "2": pull_all}
    while True:
        print(MENU)
        choice = ask("Choose: ").strip().lower()
        if choice == "q":
            log_info("Bye")
            return
        workflow = workflows.get(choice)
        if workflow is None:
            log_warning(f"Unknown option '{choice}'")
            continue
        workflow(settings, ask=ask)


def main() -> int:
    settings = Settings.from_env()
    if not check_prerequisites([settings.git_executable, settings.gh_executable]):
        return 1
    try:
        menu_loop(settings)
    except (KeyboardInterrupt, EOFError):
        print()
        log_warning("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
