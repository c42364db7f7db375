from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from selphlyze.schemas.analysis.analysis_base import AnalysisResult
from selphlyze.schemas.quiz.quiz_base import QuizAnswers


class SaveResultsRequest(QuizAnswers):
    self_code: str = Field(alias="selfCode", pattern=r"^[A-Za-z0-9]{6}$")
    total_time: int = Field(alias="totalTime", ge=0)
    analysis: AnalysisResult
    completed_at: Optional[datetime] = Field(default=None, alias="completedAt")

    @model_validator(mode="after")
    def check_total_time(self):
        if self.total_time < sum(self.question_times):
            raise ValueError("totalTime must be at least the sum of questionTimes")
        return self


class SaveResultsResponse(BaseModel):
    success: bool
    session_id: UUID = Field(alias="sessionId")

    class Config:
        populate_by_name = True


class ClientMetadata(BaseModel):
    ip_address: str
    user_agent: str


class TestSessionOut(BaseModel):
    id: UUID
    self_code: str = Field(alias="selfCode")
    demographics: dict
    answers: List[int]
    question_times: List[int] = Field(alias="questionTimes")
    total_time: int = Field(alias="totalTime")
    analysis: dict
    ip_address: str = Field(alias="ipAddress")
    user_agent: str = Field(alias="userAgent")
    completed_at: Optional[datetime] = Field(default=None, alias="completedAt")
    created_at: datetime = Field(alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
