from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def scripted_ask():
    """Build an ``ask`` callable that replays answers and records prompts."""

    def factory(*answers):
        remaining = list(answers)
        prompts = []

        def ask(prompt):
            prompts.append(prompt)
            if not remaining:
                raise AssertionError(f"unexpected prompt: {prompt}")
            return remaining.pop(0)

        ask.prompts = prompts
        ask.remaining = remaining
        return ask

    return factory
