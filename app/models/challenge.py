# app/models/challenge.py
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Tuple


class Difficulty(str, enum.Enum):
    basic = "Basic"
    intermediate = "Intermediate"
    advanced = "Advanced"


@dataclass(frozen=True)
class ChallengeTest:
    name: str
    input: Tuple[Any, ...]
    expected: Any


@dataclass(frozen=True)
class ChallengeSummary:
    """Public view of a challenge (everything except its test cases)."""

    id: str
    title: str
    difficulty: Difficulty
    description: str
    prompt: str
    starter_code: str
    function_name: str


@dataclass(frozen=True)
class Challenge(ChallengeSummary):
    tests: Tuple[ChallengeTest, ...] = field(default_factory=tuple)

    def summary(self) -> ChallengeSummary:
        return ChallengeSummary(
            id=self.id,
            title=self.title,
            difficulty=self.difficulty,
            description=self.description,
            prompt=self.prompt,
            starter_code=self.starter_code,
            function_name=self.function_name,
        )

    def __repr__(self) -> str:
        return f"<Challenge id={self.id} tests={len(self.tests)}>"
