from typing import List

from pydantic import BaseModel, Field

from selphlyze.schemas.quiz.quiz_base import QuizAnswers


TRAIT_KEYS = (
    "decisionMaking",
    "socialPreferences",
    "learningApproach",
    "communicationStyle",
    "stressManagement",
    "valuesAndMotivations",
)


class PersonalityTraits(BaseModel):
    decision_making: str = Field(alias="decisionMaking")
    social_preferences: str = Field(alias="socialPreferences")
    learning_approach: str = Field(alias="learningApproach")
    communication_style: str = Field(alias="communicationStyle")
    stress_management: str = Field(alias="stressManagement")
    values_and_motivations: str = Field(alias="valuesAndMotivations")

    class Config:
        populate_by_name = True


class AnalysisResult(BaseModel):
    self_code: str = Field(alias="selfCode", pattern=r"^[A-Za-z0-9]{6}$")
    personality_summary: str = Field(alias="personalitySummary")
    core_strengths: List[str] = Field(alias="coreStrengths", min_length=3, max_length=4)
    personality_traits: PersonalityTraits = Field(alias="personalityTraits")
    growth_areas: List[str] = Field(alias="growthAreas", min_length=2, max_length=3)
    career_insights: str = Field(alias="careerInsights")
    relationship_dynamics: str = Field(alias="relationshipDynamics")

    class Config:
        populate_by_name = True


class AnalyzeRequest(QuizAnswers):
    pass


class AnalyzeResponse(BaseModel):
    analysis: AnalysisResult
