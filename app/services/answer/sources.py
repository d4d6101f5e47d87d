"""Normalization and classification of answer sources."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Tuple
from urllib.parse import urlsplit

from app.config import get_settings
from app.services.answer.models import SourceCard, SourceType

log = logging.getLogger(__name__)

WWW_PREFIX = re.compile(r"^www\.")
URL_KEYS = ("url", "link")
TITLE_KEYS = ("title", "name", "source")
SNIPPET_KEYS = ("snippet", "description", "summary")
GOV_HOSTS = ("gov.in", "nic.in")


def _first_present(record: Mapping[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


def _string_field(record: Mapping[str, Any], keys: Tuple[str, ...]) -> Optional[str]:
    value = _first_present(record, keys)
    return value.strip() if isinstance(value, str) else None


def _coerce_source(item: Any, index: int) -> Optional[SourceCard]:
    default_title = f"Source {index + 1}"
    if isinstance(item, str):
        url = item.strip()
        return SourceCard(title=default_title, url=url) if url else None
    if isinstance(item, SourceCard):
        item = asdict(item)
    if not isinstance(item, Mapping):
        return None
    url = _string_field(item, URL_KEYS)
    if not url:
        return None
    title = _string_field(item, TITLE_KEYS)
    return SourceCard(
        title=default_title if title is None else title,
        url=url,
        snippet=_string_field(item, SNIPPET_KEYS),
    )


def normalize_sources(raw: Any, *, limit: Optional[int] = None) -> List[SourceCard]:
    """Turn a loosely typed source list into deduplicated SourceCards.

    Entries are keyed by (title, url). A later duplicate replaces the stored
    card but keeps the position of the first occurrence. Anything that is not
    a list yields an empty result.
    """
    limit = get_settings().max_sources if limit is None else limit
    if not isinstance(raw, (list, tuple)):
        return []

    unique: Dict[Tuple[str, str], SourceCard] = {}
    dropped = 0
    for index, item in enumerate(raw):
        card = _coerce_source(item, index)
        if card is None:
            dropped += 1
            continue
        unique[(card.title, card.url)] = card
    if dropped:
        log.debug("Dropped %d malformed source entries", dropped)
    return list(unique.values())[:limit]


def extract_hostname(url: str) -> str:
    """Hostname without a leading "www."; the input itself if it is not a URL."""
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return url
    if not parts.scheme or not host:
        return url
    return WWW_PREFIX.sub("", host)


class _SourceText(NamedTuple):
    host: str
    text: str


def _is_gov(source: _SourceText) -> bool:
    return any(suffix in source.host for suffix in GOV_HOSTS)


def _mentions(*needles: str) -> Callable[[_SourceText], bool]:
    return lambda source: any(needle in source.text for needle in needles)


ClassifierRule = Tuple[Callable[[_SourceText], bool], SourceType]

CLASSIFIER_RULES: List[ClassifierRule] = [
    (_mentions(".pdf", "guideline"), SourceType.GUIDELINE_PDF),
    (lambda s: _is_gov(s) and _mentions("state", "department")(s), SourceType.STATE_DEPT),
    (_is_gov, SourceType.GOV_PORTAL),
]


def classify_source(source: SourceCard) -> SourceType:
    subject = _SourceText(
        host=extract_hostname(source.url).lower(),
        text=f"{source.title} {source.snippet or ''} {source.url}".lower(),
    )
    for predicate, source_type in CLASSIFIER_RULES:
        if predicate(subject):
            return source_type
    return SourceType.REFERENCE


def short_label(text: str, *, max_chars: Optional[int] = None) -> str:
    max_chars = get_settings().short_label_chars if max_chars is None else max_chars
    if len(text) <= max_chars:
        return text
    return f"{text[: max_chars - 3]}..."


@dataclass
class SourceEntry:
    index: int
    anchor: str
    hostname: str
    source_type: SourceType
    source: SourceCard


def describe_sources(sources: List[SourceCard]) -> List[SourceEntry]:
    """Numbered entries for the sources panel; anchors match citation markers."""
    return [
        SourceEntry(
            index=number,
            anchor=f"src-{number}",
            hostname=extract_hostname(source.url),
            source_type=classify_source(source),
            source=source,
        )
        for number, source in enumerate(sources, start=1)
    ]
