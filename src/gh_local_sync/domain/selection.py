# Selection expression parsing
#
# Grammar (comma separated, whitespace around tokens ignored):
#   7        a single 1-based index
#   2-5      an inclusive range, start <= end
#   A / all  every candidate
#   Q / quit / none / cancel   cancel the prompt (so does blank input)
#
# Bad tokens are reported and dropped one by one; the rest of the
# expression is still used.

import re
from typing import List, Optional

from ..infra.logger import log_warning

SELECT_ALL_TOKENS = {"a", "all"}
CANCEL_TOKENS = {"q", "quit", "none", "cancel"}

RANGE_PATTERN = re.compile(r'^(\d+)\s*-\s*(\d+)$')
INDEX_PATTERN = re.compile(r'^\d+$')


def _in_range(index: int, candidate_count: int) -> bool:
    if 1 <= index <= candidate_count:
        return True
    log_warning(f"Ignoring out-of-range index {index} (valid: 1-{candidate_count})")
    return False


def parse(expression: str, candidate_count: int) -> Optional[List[int]]:
    """Parse a selection expression into sorted, unique 1-based indices.

    Returns ``None`` when the user cancelled. An empty list means nothing
    usable was selected and the caller should ask again.
    """
    text = (expression or "").strip()
    lowered = text.lower()

    if not text or lowered in CANCEL_TOKENS:
        return None
    if lowered in SELECT_ALL_TOKENS:
        return list(range(1, candidate_count + 1))

    selected = set()
    for raw_token in text.split(","):
        token = raw_token.strip()
        if not token:
            continue

        range_match = RANGE_PATTERN.match(token)
        if range_match:
            start, end = int(range_match.group(1)), int(range_match.group(2))
            if start > end:
                log_warning(f"Ignoring invalid range '{token}' (start is greater than end)")
                continue
            low, high = max(start, 1), min(end, candidate_count)
            if low != start or high != end:
                log_warning(
                    f"Ignoring out-of-range part of '{token}' (valid: 1-{candidate_count})"
                )
            selected.update(range(low, high + 1))
            continue

        if INDEX_PATTERN.match(token):
            index = int(token)
            if _in_range(index, candidate_count):
                selected.add(index)
            continue

        log_warning(f"Ignoring unrecognized selection '{token}'")

    return sorted(selected)
