"""
Analysis requester.

Turns a completed quiz into a prompt, asks the completion service for a
structured personality analysis and normalizes whatever comes back into an
``AnalysisResult``. Output that cannot be read as the expected JSON shape is
replaced by a generic analysis; only a failed call is reported upward.
"""
import json
import logging
import random
import re
import string
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from pydantic import ValidationError

from selphlyze.schemas.analysis.analysis_base import TRAIT_KEYS, AnalysisResult
from selphlyze.services.demographics import Demographics
from selphlyze.services.llm_client import CompletionClient, LLMClientError

logger = logging.getLogger(__name__)

SELF_CODE_LENGTH = 6
SELF_CODE_ALPHABET = string.ascii_uppercase + string.digits


class AnalysisUnavailableError(Exception):
    """Raised when the completion service could not be reached at all"""
    pass


@dataclass(frozen=True)
class Parsed:
    analysis: AnalysisResult


@dataclass(frozen=True)
class Malformed:
    reason: str


ParseOutcome = Union[Parsed, Malformed]


def build_prompt(
    answers: Sequence[int],
    demographics: Demographics,
    question_times: Sequence[int],
) -> str:
    responses = "\n".join(
        f"Question {index + 1}: Selected option {answer + 1}"
        for index, answer in enumerate(answers)
    )
    times = "\n".join(
        f"Question {index + 1}: {time}ms"
        for index, time in enumerate(question_times)
    )
    traits = ", ".join(TRAIT_KEYS)

    return f"""As a professional psychologist, analyze the following psychological assessment results:

Demographics:
- Age: {demographics.age}
- Gender: {demographics.gender}
- Country: {demographics.country}

Test Responses (out of {len(answers)} questions):
{responses}

Response Times (in milliseconds):
{times}

Please provide a comprehensive psychological analysis including:

1. selfCode: a unique 6-character alphanumeric code that represents this personality profile (e.g., "A7X9P2")
2. personalitySummary: a concise 2-3 sentence overview of the primary personality traits
3. coreStrengths: 3-4 key strengths based on the responses
4. personalityTraits: an object with the keys {traits}
5. growthAreas: 2-3 areas for potential development
6. careerInsights: suitable career paths and work environments
7. relationshipDynamics: how this person typically interacts in relationships

Return ONLY a JSON object with exactly these keys. Be insightful, accurate, and encouraging while maintaining professional psychological standards."""


def _strip_markdown(text: str) -> str:
    match = re.search(r"```(?:json)?\s*([\s\S]*?)\s*```", text)
    if match:
        return match.group(1).strip()
    return text.strip()


def parse_analysis(raw: Optional[str]) -> ParseOutcome:
    """
    Read the completion text as an AnalysisResult.

    Keys outside the result schema are dropped; every schema field is kept
    as the model wrote it.
    """
    if not raw or not raw.strip():
        return Malformed("empty response")

    try:
        data = json.loads(_strip_markdown(raw))
    except json.JSONDecodeError as e:
        return Malformed(f"invalid JSON: {e.msg}")

    if not isinstance(data, dict):
        return Malformed("response is not a JSON object")

    try:
        return Parsed(AnalysisResult.model_validate(data))
    except ValidationError as e:
        return Malformed(f"unexpected shape: {e.error_count()} error(s)")


def generate_self_code(rng: Optional[random.Random] = None) -> str:
    rng = rng or random.SystemRandom()
    return "".join(rng.choice(SELF_CODE_ALPHABET) for _ in range(SELF_CODE_LENGTH))


def fallback_analysis(rng: Optional[random.Random] = None) -> AnalysisResult:
    # the code is random; it is not derived from the answers
    return AnalysisResult(
        selfCode=generate_self_code(rng),
        personalitySummary=(
            "Your responses indicate a unique and complex personality profile with "
            "distinct patterns in decision-making and social interaction."
        ),
        coreStrengths=[
            "Analytical thinking",
            "Adaptability",
            "Empathy",
            "Problem-solving",
        ],
        personalityTraits={
            "decisionMaking": "You approach decisions thoughtfully, considering multiple perspectives.",
            "socialPreferences": "You value meaningful connections and authentic interactions.",
            "learningApproach": "You prefer structured learning with practical applications.",
            "communicationStyle": "You communicate with clarity and consideration for others.",
            "stressManagement": "You handle stress by focusing on solutions and seeking support.",
            "valuesAndMotivations": "You are motivated by personal growth and meaningful contribution.",
        },
        growthAreas=[
            "Developing confidence in quick decision-making",
            "Expanding comfort zone in social situations",
            "Building resilience in high-pressure environments",
        ],
        careerInsights=(
            "You would thrive in environments that value collaboration, creativity, "
            "and continuous learning."
        ),
        relationshipDynamics=(
            "You build deep, meaningful relationships based on trust and mutual understanding."
        ),
    )


class Analyzer:
    def __init__(self, client: CompletionClient, rng: Optional[random.Random] = None):
        self.client = client
        self.rng = rng

    async def analyze(
        self,
        answers: Sequence[int],
        demographics: Demographics,
        question_times: Sequence[int],
    ) -> AnalysisResult:
        """
        Analyze a completed quiz.

        Raises:
            AnalysisUnavailableError: if the completion call itself failed
        """
        prompt = build_prompt(answers, demographics, question_times)

        try:
            raw = await self.client.complete(prompt)
        except LLMClientError as e:
            raise AnalysisUnavailableError(str(e)) from e

        outcome = parse_analysis(raw)
        if isinstance(outcome, Parsed):
            return outcome.analysis

        logger.warning(f"⚠️ Using fallback analysis: {outcome.reason}")
        return fallback_analysis(self.rng)
