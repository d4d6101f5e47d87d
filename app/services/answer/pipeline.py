"""Composition of the extractors into a renderable view of one assistant turn."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from app.services.answer.citations import inject_citations
from app.services.answer.models import (
    FieldStatus,
    ProfileAttributes,
    ProfileField,
    SchemeCard,
    Section,
    SectionKey,
    SourceCard,
)
from app.services.answer.profile import extract_profile, field_status, missing_fields
from app.services.answer.prompts import strict_regenerate_prompt
from app.services.answer.schemes import extract_schemes
from app.services.answer.sections import build_tabs, segment_sections
from app.services.answer.sources import (
    SourceEntry,
    describe_sources,
    normalize_sources,
    short_label,
)

log = logging.getLogger(__name__)

USER = "user"
ASSISTANT = "assistant"


@dataclass
class Message:
    role: str
    content: str
    sources: Any = None


@dataclass
class AnswerView:
    profile: ProfileAttributes
    status: FieldStatus
    missing: List[ProfileField]
    sections: List[Section]
    tabs: List[SectionKey]
    show_tabs: bool
    active_tab: Optional[SectionKey]
    markdown: str
    schemes: List[SchemeCard]
    sources: List[SourceEntry] = field(default_factory=list)

    @property
    def uncertain(self) -> bool:
        return not self.sources

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profile": self.profile.as_dict(),
            "status": {key.value: value.value for key, value in self.status.items()},
            "missing": [item.value for item in self.missing],
            "sections": [_plain(asdict(section)) for section in self.sections],
            "tabs": [tab.value for tab in self.tabs],
            "show_tabs": self.show_tabs,
            "active_tab": self.active_tab.value if self.active_tab else None,
            "markdown": self.markdown,
            "schemes": [_plain(asdict(scheme)) for scheme in self.schemes],
            "sources": [_plain(asdict(entry)) for entry in self.sources],
            "uncertain": self.uncertain,
        }


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def annotate_answer(
    answer: str,
    raw_sources: Any = None,
    profile_text: str = "",
    active_tab: Optional[SectionKey] = None,
) -> AnswerView:
    """Run every extractor over one answer and its preceding user turn."""
    if not isinstance(answer, str):
        answer = ""
    sources: List[SourceCard] = normalize_sources(raw_sources)
    profile = extract_profile(profile_text or "")
    status = field_status(profile)

    sections = segment_sections(answer)
    tab_view = build_tabs(sections, answer, active_tab)
    markdown = inject_citations(tab_view.display_text(answer), len(sources))
    schemes = extract_schemes(answer, sources)

    log.debug(
        "Annotated answer: sections=%d schemes=%d sources=%d",
        len(sections),
        len(schemes),
        len(sources),
    )
    return AnswerView(
        profile=profile,
        status=status,
        missing=missing_fields(status),
        sections=sections,
        tabs=tab_view.tabs,
        show_tabs=tab_view.show_tabs,
        active_tab=tab_view.active,
        markdown=markdown,
        schemes=schemes,
        sources=describe_sources(sources),
    )


def previous_user_content(messages: Sequence[Message], index: int) -> str:
    for message in reversed(messages[:index]):
        if message.role == USER:
            return message.content
    return ""


def annotate_conversation(messages: Sequence[Message]) -> List[Tuple[int, AnswerView]]:
    """Annotate every assistant message, keyed by its position in the conversation."""
    views: List[Tuple[int, AnswerView]] = []
    for index, message in enumerate(messages):
        if message.role != ASSISTANT:
            continue
        views.append(
            (
                index,
                annotate_answer(
                    message.content,
                    message.sources,
                    profile_text=previous_user_content(messages, index),
                ),
            )
        )
    return views


def history_turns(messages: Sequence[Message]) -> List[Tuple[int, str]]:
    """Newest-first labels of the user turns."""
    turns = [
        (index, short_label(message.content))
        for index, message in enumerate(messages)
        if message.role == USER
    ]
    return list(reversed(turns))


def has_uncertain_evidence(messages: Sequence[Message]) -> bool:
    return any(
        message.role == ASSISTANT and not normalize_sources(message.sources)
        for message in messages
    )


def regenerate_question(messages: Sequence[Message], assistant_index: int) -> Optional[str]:
    """Question to resend for an official-sources-only answer, if a user turn precedes it."""
    question = previous_user_content(messages, assistant_index)
    return strict_regenerate_prompt(question) if question else None
