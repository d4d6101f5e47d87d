"""Follow-up prompt text offered next to an annotated answer."""

from __future__ import annotations

from typing import Dict

from app.services.answer.models import ProfileField, SchemeCard
from app.services.answer.profile import field_label

PROFILE_TEMPLATE = "State: \nAge: \nCategory: \nOccupation: \nFamily income: \nNeed:"

QUICK_FILTERS = (
    "Only scholarships",
    "Only Bihar",
    "Highest benefit first",
    "Women-focused only",
)

OFFICIAL_ONLY_SUFFIX = (
    "Use only official government sources (gov.in, nic.in, official PDFs). Add citations."
)


def append_line(current: str, text: str) -> str:
    """Add text to the composer, on a new line when something is already there."""
    return f"{current}\n{text}" if current else text


def append_field_prompt(current: str, field: ProfileField) -> str:
    return append_line(current, f"{field_label(field)}: ")


def scheme_followups(card: SchemeCard) -> Dict[str, str]:
    return {
        "eligibility": f"Check detailed eligibility for {card.name} with my profile.",
        "documents": f"Give me required document checklist for {card.name}.",
        "apply": f"Give step-by-step apply process for {card.name}.",
    }


def strict_regenerate_prompt(question: str) -> str:
    return f"{question}\n\n{OFFICIAL_ONLY_SUFFIX}"
