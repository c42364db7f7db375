"""
Shared fixtures: in-memory database, fake completion client, sample payloads.
"""

import json

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from selphlyze.core.database import Base, get_db
from selphlyze.models.analytics_db import analytics_db  # noqa: F401
from selphlyze.models.session_db import session_db  # noqa: F401
from selphlyze.routes.quiz.quiz_routers import get_analyzer
from selphlyze.services.analysis import Analyzer
from selphlyze.services.demographics import Demographics
from selphlyze.services.llm_client import LLMAPIError


class FakeCompletionClient:
    """Stands in for CompletionClient; returns canned text or raises."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.prompts = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


def sample_analysis() -> dict:
    return {
        "selfCode": "A7X9P2",
        "personalitySummary": "A thoughtful planner who values connection.",
        "coreStrengths": ["Planning", "Empathy", "Curiosity"],
        "personalityTraits": {
            "decisionMaking": "Deliberate",
            "socialPreferences": "Small groups",
            "learningApproach": "Structured",
            "communicationStyle": "Considerate",
            "stressManagement": "Methodical",
            "valuesAndMotivations": "Growth",
        },
        "growthAreas": ["Delegation", "Spontaneity"],
        "careerInsights": "Research or project management roles.",
        "relationshipDynamics": "Loyal and attentive.",
    }


def sample_demographics() -> dict:
    return {"age": "25-34", "gender": "Female", "country": "Canada"}


def sample_quiz() -> dict:
    return {
        "answers": [0, 1, 2, 3, 4, 5, 0, 1, 2, 3],
        "questionTimes": [1200, 3400, 2100, 900, 4000, 1500, 2500, 1800, 3000, 2200],
        "demographics": sample_demographics(),
    }


def sample_save_payload() -> dict:
    quiz = sample_quiz()
    return {
        **quiz,
        "selfCode": "A7X9P2",
        "totalTime": sum(quiz["questionTimes"]) + 500,
        "analysis": sample_analysis(),
    }


@pytest.fixture
def demographics():
    return Demographics(**sample_demographics())


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fake_llm():
    return FakeCompletionClient(response=json.dumps(sample_analysis()))


@pytest.fixture
def client(db, fake_llm):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_analyzer] = lambda: Analyzer(fake_llm)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_llm():
    return FakeCompletionClient(error=LLMAPIError("quota exceeded"))
