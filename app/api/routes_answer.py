"""Routes exposing the answer annotation pipeline."""

from typing import Any, Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from app.config import Settings, get_settings
from app.services.answer.models import SectionKey
from app.services.answer.pipeline import annotate_answer
from app.services.answer.profile import extract_profile, field_status, missing_fields

MAX_PROFILE_LEN = 4000

router = APIRouter(prefix="/answer", tags=["answer"])


class AnnotateRequest(BaseModel):
    answer: str
    sources: Any = None
    profile_text: str = Field(default="", max_length=MAX_PROFILE_LEN)
    active_tab: SectionKey | None = Field(default=None, description="Tab to display")


class ProfileRequest(BaseModel):
    text: str = Field(..., max_length=MAX_PROFILE_LEN)


class ProfileResponse(BaseModel):
    profile: dict[str, str]
    status: dict[str, str]
    missing: list[str]


@router.post("/annotate", status_code=status.HTTP_200_OK)
def annotate(
    payload: AnnotateRequest, settings: Annotated[Settings, Depends(get_settings)]
) -> dict[str, Any]:
    """Annotate one assistant answer for rendering."""
    if len(payload.answer) > settings.max_answer_chars:
        raise HTTPException(
            status_code=422,
            detail=f"Answer longer than {settings.max_answer_chars} characters",
        )
    view = annotate_answer(
        payload.answer,
        payload.sources,
        profile_text=payload.profile_text,
        active_tab=payload.active_tab,
    )
    return view.to_dict()


@router.post("/profile", response_model=ProfileResponse)
def profile(payload: ProfileRequest) -> ProfileResponse:
    """Profile fields detected in a user message."""
    attributes = extract_profile(payload.text)
    statuses = field_status(attributes)
    return ProfileResponse(
        profile=attributes.as_dict(),
        status={key.value: value.value for key, value in statuses.items()},
        missing=[item.value for item in missing_fields(statuses)],
    )
