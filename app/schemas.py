# app/schemas.py
# ------------------------------------------------------------
# Pydantic v2 schemas for the arena API (camelCase on the wire)
# ------------------------------------------------------------
from datetime import datetime
import re
from typing import List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeFloat,
    NonNegativeInt,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from app.models.challenge import Difficulty


_CONTROL_CHAR_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")
_SCRIPT_TAG_RE = re.compile(r"<\s*/?\s*script", re.IGNORECASE)


def _sanitize_single_line_text(value: str | None) -> str | None:
    if value is None:
        return value
    if not isinstance(value, str):
        raise ValueError("Expected string input")
    cleaned = _CONTROL_CHAR_RE.sub("", value).strip()
    if not cleaned:
        raise ValueError("Value cannot be empty")
    if any(ch in {"\n", "\r"} for ch in cleaned):
        raise ValueError("Value must be a single line of text")
    if "<" in cleaned or ">" in cleaned:
        raise ValueError("HTML tags are not allowed in this field")
    if _SCRIPT_TAG_RE.search(cleaned):
        raise ValueError("Script tags are not allowed")
    return cleaned


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================
# Challenges
# ============================================================

class ChallengeSummaryRead(_CamelModel):
    id: str
    title: str
    difficulty: Difficulty
    description: str
    prompt: str
    starter_code: str
    function_name: str


# ============================================================
# Leaderboard
# ============================================================

class LeaderboardEntryRead(_CamelModel):
    id: str
    challenge_id: str
    challenge_title: str
    handle: str
    score: Union[int, float]
    tests_passed: int
    total_tests: int
    runtime_ms: Union[int, float]
    submitted_at: datetime


class LeaderboardResponse(_CamelModel):
    leaderboard: List[LeaderboardEntryRead] = Field(default_factory=list)


# ============================================================
# Submissions
# ============================================================

class RunSubmission(_CamelModel):
    """A graded arena run handed over by the grading pipeline."""

    challenge_id: str = Field(min_length=1, max_length=64)
    handle: str = Field(min_length=2, max_length=40)
    tests_passed: int = Field(ge=0)
    total_tests: int = Field(ge=1)
    runtime_ms: Union[NonNegativeInt, NonNegativeFloat]

    @field_validator("handle", mode="before")
    @classmethod
    def _clean_handle(cls, value: str) -> str:
        return _sanitize_single_line_text(value)

    @model_validator(mode="after")
    def _check_counts(self) -> "RunSubmission":
        if self.tests_passed > self.total_tests:
            raise ValueError("testsPassed cannot exceed totalTests")
        return self


class RunSummaryRead(_CamelModel):
    passed: bool
    tests_passed: int
    total_tests: int
    score: int
    runtime_ms: Union[int, float]


class SubmissionResult(_CamelModel):
    summary: RunSummaryRead
    leaderboard: List[LeaderboardEntryRead] = Field(default_factory=list)
    message: Optional[str] = None
