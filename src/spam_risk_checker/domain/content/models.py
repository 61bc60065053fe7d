"""Analysis input/output models.

Input is a tagged union keyed on ``platform``: each case carries only the
fields its platform uses, so a sender address can never leak into a Reddit
or Facebook evaluation.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Platform = Literal["email", "redditLike", "facebookLike"]
RiskLevel = Literal["Low", "Medium", "High"]


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


class _ContentBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> Any:
        return _none_to_empty(value)


class EmailContent(_ContentBase):
    """Cold email: subject line, body and sender address."""

    platform: Literal["email"] = "email"
    title: str = ""
    from_email: str = Field(default="", alias="fromEmail")

    @field_validator("title", "from_email", mode="before")
    @classmethod
    def _coerce_optional(cls, value: Any) -> Any:
        return _none_to_empty(value)


class RedditPost(_ContentBase):
    """Long-form community post with a title."""

    platform: Literal["redditLike"] = "redditLike"
    title: str = ""

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> Any:
        return _none_to_empty(value)


class FacebookPost(_ContentBase):
    """Short-form social post; body only."""

    platform: Literal["facebookLike"] = "facebookLike"


AnalysisInput = Annotated[
    Union[EmailContent, RedditPost, FacebookPost],
    Field(discriminator="platform"),
]


def title_of(item: EmailContent | RedditPost | FacebookPost) -> str:
    """Return the title/subject, or an empty string for platforms without one."""

    return str(getattr(item, "title", "") or "")


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(ge=0, le=100, default=0)
    risk_level: RiskLevel = Field(default="Low", alias="riskLevel")
    reasons: list[str] = Field(default_factory=list)

    def as_payload(self) -> dict[str, Any]:
        """Shape expected by the rendering layer (camelCase keys)."""

        return self.model_dump(by_alias=True)
