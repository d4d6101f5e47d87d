"""Scheme cards recognized from numbered list items."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from app.config import get_settings
from app.services.answer.models import SchemeCard, SourceCard

log = logging.getLogger(__name__)

NUMBERED_ITEM = re.compile(r"^\d+\.\s+(?:\*\*)?(.+?)(?:\*\*)?$")
MIN_NAME_CHARS = 6


def _source_url(sources: Sequence[SourceCard], position: int) -> Optional[str]:
    if not sources:
        return None
    if position < len(sources) and sources[position].url:
        return sources[position].url
    return sources[0].url or None


def extract_schemes(
    markdown: str, sources: Sequence[SourceCard], *, limit: Optional[int] = None
) -> List[SchemeCard]:
    """Collect numbered list items that look like scheme names.

    The i-th accepted item is linked to the i-th source (or the first source
    when there are fewer sources than schemes). Names shorter than six
    characters are skipped.
    """
    limit = get_settings().max_schemes if limit is None else limit
    if not isinstance(markdown, str):
        return []
    schemes: List[SchemeCard] = []
    skipped = 0
    for line in markdown.split("\n"):
        if len(schemes) >= limit:
            break
        numbered = NUMBERED_ITEM.match(line)
        if not numbered:
            continue
        name = numbered.group(1).strip()
        if len(name) < MIN_NAME_CHARS:
            skipped += 1
            continue
        schemes.append(SchemeCard(name=name, source_url=_source_url(sources, len(schemes))))
    if skipped:
        log.debug("Skipped %d short numbered items", skipped)
    return schemes


def add_to_shortlist(shortlist: List[SchemeCard], card: SchemeCard) -> List[SchemeCard]:
    """Return a new shortlist with ``card`` appended unless its name is already there."""
    name = card.name.lower()
    if any(item.name.lower() == name for item in shortlist):
        return list(shortlist)
    return [*shortlist, card]
