"""Typed models for annotated answers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class ProfileField(str, Enum):
    STATE = "state"
    AGE = "age"
    CATEGORY = "category"
    INCOME = "income"


class MatchStatus(str, Enum):
    MATCH = "match"
    MISSING = "missing"


class SectionKey(str, Enum):
    SUMMARY = "summary"
    ELIGIBILITY = "eligibility"
    DOCUMENTS = "documents"
    APPLY = "apply"
    OTHER = "other"


# Section keys that can become tabs, in display order.
TAB_ORDER = (
    SectionKey.SUMMARY,
    SectionKey.ELIGIBILITY,
    SectionKey.DOCUMENTS,
    SectionKey.APPLY,
)


class SourceType(str, Enum):
    GOV_PORTAL = "Gov portal"
    GUIDELINE_PDF = "Guideline PDF"
    STATE_DEPT = "State dept"
    REFERENCE = "Reference"


class Effort(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


FieldStatus = Dict[ProfileField, MatchStatus]


@dataclass
class ProfileAttributes:
    state: Optional[str] = None
    age: Optional[str] = None
    category: Optional[str] = None
    income: Optional[str] = None

    def get(self, field: ProfileField) -> Optional[str]:
        return getattr(self, field.value)

    def as_dict(self) -> Dict[str, str]:
        """Return detected fields only; undetected ones are left out."""
        return {
            field.value: value
            for field in ProfileField
            if (value := self.get(field)) is not None
        }


@dataclass
class Section:
    key: SectionKey
    title: str
    content: str


@dataclass
class SourceCard:
    title: str
    url: str
    snippet: Optional[str] = None


@dataclass
class SchemeCard:
    name: str
    benefit: str = "Check source details"
    deadline: str = "Not specified"
    effort: Effort = Effort.MEDIUM
    source_url: Optional[str] = None
