"""Citation markers appended to answer lines."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from app.config import get_settings

log = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"^#{1,6}\s")
BULLET_PATTERN = re.compile(r"^\s*[-*]\s")
NUMBERED_PATTERN = re.compile(r"^\s*\d+\.\s")
CITATION_PATTERN = re.compile(r"\[[0-9]+\]\(#src-[0-9]+\)")


def citation_marker(number: int) -> str:
    return f"[{number}](#src-{number})"


def _is_claim(stripped: str, min_chars: int) -> bool:
    return bool(
        BULLET_PATTERN.match(stripped)
        or NUMBERED_PATTERN.match(stripped)
        or len(stripped) > min_chars
    )


def inject_citations(
    markdown: str, source_count: int, *, min_chars: Optional[int] = None
) -> str:
    """Append a source marker to every bullet, numbered item and long line.

    Source numbers are handed out round-robin over ``source_count`` with one
    counter for the whole document; they say nothing about which source backs
    which claim. Lines that already carry a marker are left alone.
    """
    if source_count <= 0:
        return markdown
    min_chars = get_settings().citation_min_chars if min_chars is None else min_chars

    counter = 1
    out: List[str] = []
    for line in markdown.split("\n"):
        stripped = line.strip()
        if not stripped or HEADING_PATTERN.match(stripped):
            out.append(line)
            continue
        if not _is_claim(stripped, min_chars) or CITATION_PATTERN.search(stripped):
            out.append(line)
            continue
        number = ((counter - 1) % source_count) + 1
        counter += 1
        out.append(f"{line} {citation_marker(number)}")
    log.debug("Injected %d citation markers", counter - 1)
    return "\n".join(out)
