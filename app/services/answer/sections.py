"""Heading-based segmentation of markdown answers into titled sections."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from app.config import get_settings
from app.services.answer.models import TAB_ORDER, Section, SectionKey

log = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"^#{1,6}\s+(.+)$")
DEFAULT_TITLE = "Summary"

HeadingRule = Tuple[Callable[[str], bool], SectionKey]

# Checked in order against the lowercased heading text.
HEADING_RULES: List[HeadingRule] = [
    (lambda title: "eligib" in title, SectionKey.ELIGIBILITY),
    (lambda title: "document" in title, SectionKey.DOCUMENTS),
    (lambda title: "apply" in title or "process" in title, SectionKey.APPLY),
    (lambda title: "summary" in title or "overview" in title, SectionKey.SUMMARY),
]


def classify_heading(title: str) -> SectionKey:
    lower = title.lower()
    for predicate, key in HEADING_RULES:
        if predicate(lower):
            return key
    return SectionKey.OTHER


def segment_sections(markdown: str) -> List[Section]:
    """Split markdown into sections at every heading line.

    Text before the first heading belongs to an implicit "Summary" section.
    Blocks that are empty after trimming are dropped. Input without headings,
    or with nothing left after dropping, comes back whole and untrimmed as a
    single summary section.
    """
    if not isinstance(markdown, str):
        markdown = ""
    sections: List[Section] = []
    title = DEFAULT_TITLE
    key = SectionKey.SUMMARY
    buffer: List[str] = []
    headings = 0

    def flush() -> None:
        content = "\n".join(buffer).strip()
        if content:
            sections.append(Section(key=key, title=title, content=content))

    for line in markdown.split("\n"):
        heading = HEADING_PATTERN.match(line)
        if not heading:
            buffer.append(line)
            continue
        flush()
        headings += 1
        title = heading.group(1).strip()
        key = classify_heading(title)
        buffer = []
    flush()

    if not headings or not sections:
        return [Section(key=SectionKey.SUMMARY, title=DEFAULT_TITLE, content=markdown)]
    log.debug("Segmented answer into %d sections", len(sections))
    return sections


@dataclass
class TabView:
    tabs: List[SectionKey]
    sections: Dict[SectionKey, Section] = field(default_factory=dict)
    show_tabs: bool = False
    active: Optional[SectionKey] = None

    def display_text(self, content: str) -> str:
        """Text to render: the active tab's section, or the whole answer."""
        if self.show_tabs and self.active is not None:
            section = self.sections.get(self.active)
            if section and section.content:
                return section.content
        return content


def build_tabs(
    sections: List[Section],
    content: str,
    active: Optional[SectionKey] = None,
    *,
    min_tabs: Optional[int] = None,
    min_chars: Optional[int] = None,
) -> TabView:
    settings = get_settings()
    min_tabs = settings.tabs_min_count if min_tabs is None else min_tabs
    min_chars = settings.tabs_min_chars if min_chars is None else min_chars

    by_key: Dict[SectionKey, Section] = {}
    for section in sections:
        if section.key != SectionKey.OTHER and section.key not in by_key:
            by_key[section.key] = section
    tabs = [key for key in TAB_ORDER if key in by_key]
    show_tabs = len(tabs) >= min_tabs and len(content) > min_chars
    return TabView(
        tabs=tabs,
        sections=by_key,
        show_tabs=show_tabs,
        active=active or (tabs[0] if tabs else None),
    )
