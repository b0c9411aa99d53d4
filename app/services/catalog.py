"""Read-only catalog of arena challenges."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from app.models.challenge import Challenge, ChallengeSummary, ChallengeTest, Difficulty


class ChallengeCatalog:
    """Lookup of challenges keyed by id, preserving catalog order."""

    def __init__(self, challenges: Iterable[Challenge]) -> None:
        self._challenges: Dict[str, Challenge] = {}
        for challenge in challenges:
            if challenge.id in self._challenges:
                raise ValueError(f"Duplicate challenge id: {challenge.id}")
            self._challenges[challenge.id] = challenge

    def __len__(self) -> int:
        return len(self._challenges)

    def __contains__(self, challenge_id: object) -> bool:
        return challenge_id in self._challenges

    def get_challenge_by_id(self, challenge_id: str) -> Optional[Challenge]:
        return self._challenges.get(challenge_id)

    def get_challenge_summaries(self) -> List[ChallengeSummary]:
        return [challenge.summary() for challenge in self._challenges.values()]


DEFAULT_CHALLENGES = (
    Challenge(
        id="rate-limiter",
        title="Implement a token bucket rate limiter",
        difficulty=Difficulty.basic,
        description=(
            "Given the current number of tokens and refill rate, determine if a request "
            "should be allowed and return the updated token count."
        ),
        prompt=(
            "Return an object with `allowed` (boolean) and `tokens` (number) after applying "
            "a token bucket limiter. The bucket refills by `refill` tokens per request and "
            "has maximum capacity `capacity`. Block the request if there are not enough tokens."
        ),
        function_name="evaluateTokenBucket",
        starter_code=(
            "export function evaluateTokenBucket(tokens: number, capacity: number, "
            "refill: number, cost: number) {\n"
            "  // TODO: return { allowed: boolean, tokens: number }\n"
            "  return { allowed: true, tokens };\n"
            "}\n"
        ),
        tests=(
            ChallengeTest(
                name="Allows request when tokens available",
                input=(5, 10, 2, 3),
                expected={"allowed": True, "tokens": 4},
            ),
            ChallengeTest(
                name="Blocks when insufficient tokens",
                input=(1, 10, 2, 5),
                expected={"allowed": False, "tokens": 3},
            ),
            ChallengeTest(
                name="Never exceed capacity",
                input=(9, 10, 5, 1),
                expected={"allowed": True, "tokens": 10},
            ),
        ),
    ),
    Challenge(
        id="sliding-window",
        title="Sliding window moving average",
        difficulty=Difficulty.intermediate,
        description="Compute the moving average of numeric samples across a fixed window size.",
        prompt=(
            "Given an array of numbers and a window size, return an array containing the "
            "moving average for each contiguous window."
        ),
        function_name="slidingWindowAverage",
        starter_code=(
            "export function slidingWindowAverage(samples: number[], windowSize: number) {\n"
            "  // TODO: return an array of averages rounded to two decimals\n"
            "  return [];\n"
            "}\n"
        ),
        tests=(
            ChallengeTest(name="Basic average", input=([1, 2, 3, 4], 2), expected=[1.5, 2.5, 3.5]),
            ChallengeTest(name="Window equals length", input=([4, 8, 12], 3), expected=[8]),
            ChallengeTest(name="Single element window", input=([5, 6, 7], 1), expected=[5, 6, 7]),
        ),
    ),
    Challenge(
        id="fanout-mapper",
        title="Broadcast payload fan-out",
        difficulty=Difficulty.advanced,
        description=(
            "Transform a payload by broadcasting it to multiple subscribers with "
            "declarative transforms."
        ),
        prompt=(
            "Implement a function that takes a payload string and an array of channel rules. "
            "Each rule can add a prefix, suffix, or convert to uppercase. Return the "
            "transformed payloads in order."
        ),
        function_name="broadcastPayload",
        starter_code=(
            "type ChannelRule = {\n"
            "  prefix?: string;\n"
            "  suffix?: string;\n"
            "  uppercase?: boolean;\n"
            "};\n"
            "\n"
            "export function broadcastPayload(payload: string, rules: ChannelRule[]) {\n"
            "  // TODO: return an array of transformed payloads\n"
            "  return [];\n"
            "}\n"
        ),
        tests=(
            ChallengeTest(
                name="Applies transforms sequentially",
                input=("ping", [{"prefix": "[edge] "}, {"uppercase": True, "suffix": " !!!"}]),
                expected=["[edge] ping", "PING !!!"],
            ),
            ChallengeTest(name="Handles no subscribers", input=("pong", []), expected=[]),
            ChallengeTest(
                name="Supports primitive payloads",
                input=("hello", [{"suffix": " world"}, {"prefix": "(prod) ", "uppercase": True}]),
                expected=["hello world", "(prod) HELLO"],
            ),
        ),
    ),
)


_catalog: Optional[ChallengeCatalog] = None


def get_challenge_catalog() -> ChallengeCatalog:
    global _catalog
    if _catalog is None:
        _catalog = ChallengeCatalog(DEFAULT_CHALLENGES)
    return _catalog


__all__ = ["ChallengeCatalog", "DEFAULT_CHALLENGES", "get_challenge_catalog"]
