import logging
from functools import lru_cache
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from selphlyze.core.config import settings
from selphlyze.schemas.analysis.analysis_base import AnalyzeRequest, AnalyzeResponse
from selphlyze.schemas.quiz.quiz_base import QuestionOut
from selphlyze.services.analysis import Analyzer, AnalysisUnavailableError
from selphlyze.services.llm_client import CompletionClient
from selphlyze.services.questions import QUESTION_BANK

logger = logging.getLogger(__name__)

quiz_router = APIRouter(prefix="/api", tags=["Quiz"])


@lru_cache
def get_analyzer() -> Analyzer:
    client = CompletionClient(
        api_key=settings.OPENAI_API_KEY,
        model=settings.OPENAI_MODEL,
        temperature=settings.OPENAI_TEMPERATURE,
        max_tokens=settings.OPENAI_MAX_TOKENS,
        timeout=settings.OPENAI_TIMEOUT_SECONDS,
    )
    return Analyzer(client)


@quiz_router.get("/questions", response_model=List[QuestionOut])
def list_questions():
    return [
        QuestionOut(id=q.id, question=q.prompt, options=list(q.options))
        for q in QUESTION_BANK
    ]


@quiz_router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_results(body: AnalyzeRequest, analyzer: Analyzer = Depends(get_analyzer)):
    try:
        analysis = await analyzer.analyze(body.answers, body.demographics, body.question_times)
    except AnalysisUnavailableError as e:
        logger.error(f"Analysis error: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to analyze results"})
    return AnalyzeResponse(analysis=analysis)
