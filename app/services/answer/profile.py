"""Profile attribute extraction from free-form user text."""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Pattern, Tuple

from app.services.answer.models import FieldStatus, MatchStatus, ProfileAttributes, ProfileField

log = logging.getLogger(__name__)

# (pattern, capture group); group 0 keeps the whole match.
ProfileRule = Tuple[Pattern[str], int]

PROFILE_RULES: Dict[ProfileField, List[ProfileRule]] = {
    ProfileField.AGE: [
        (re.compile(r"\bage\s*[:\-]?\s*([0-9]{1,2})\b", re.IGNORECASE), 1),
        (re.compile(r"\b([0-9]{1,2})\s*(?:years?|yrs?)\s*old\b", re.IGNORECASE), 1),
    ],
    ProfileField.CATEGORY: [
        (re.compile(r"\b(sc|st|obc|ews|general|minority)\b", re.IGNORECASE), 1),
        (re.compile(r"\bcategory\s*[:\-]?\s*([a-z ]+)", re.IGNORECASE), 1),
    ],
    ProfileField.INCOME: [
        (re.compile(r"\bincome\s*[:\-]?\s*([^\n,]+)", re.IGNORECASE), 1),
        (re.compile(r"₹\s?[\d,]+", re.IGNORECASE), 0),
    ],
    ProfileField.STATE: [
        (re.compile(r"\bstate\s*[:\-]?\s*([a-zA-Z ]{3,})", re.IGNORECASE), 1),
        # Any "in <words>" phrase, not only real state names.
        (re.compile(r"\bin\s+([a-zA-Z ]{3,})\b", re.IGNORECASE), 1),
    ],
}


def _first_capture(text: str, rules: List[ProfileRule]) -> Optional[str]:
    for pattern, group in rules:
        match = pattern.search(text)
        if match and match.group(group):
            return match.group(group)
    return None


def extract_profile(text: str) -> ProfileAttributes:
    """Scan text for state, age, category and income.

    Each field is matched on its own; the labelled pattern is tried before the
    contextual fallback, so "Age: 40 ... 35 years old" yields "40".
    """
    if not isinstance(text, str):
        return ProfileAttributes()
    values = {field: _first_capture(text, rules) for field, rules in PROFILE_RULES.items()}
    state = values[ProfileField.STATE]
    state = state.strip() if state else None
    profile = ProfileAttributes(
        state=state or None,
        age=values[ProfileField.AGE],
        category=values[ProfileField.CATEGORY],
        income=values[ProfileField.INCOME],
    )
    log.debug("Extracted profile fields: %s", sorted(profile.as_dict()))
    return profile


def field_status(profile: ProfileAttributes) -> FieldStatus:
    return {
        field: MatchStatus.MATCH if profile.get(field) else MatchStatus.MISSING
        for field in ProfileField
    }


def missing_fields(status: FieldStatus) -> List[ProfileField]:
    return [field for field in ProfileField if status.get(field) != MatchStatus.MATCH]


def field_label(field: ProfileField) -> str:
    """Capitalized display name, e.g. "State"."""
    return field.value[:1].upper() + field.value[1:]


def field_chip_label(field: ProfileField, status: MatchStatus) -> str:
    shown = "Provided" if status == MatchStatus.MATCH else "Missing"
    return f"{field_label(field)}: {shown}"
