from typing import List

from pydantic import BaseModel, Field, model_validator

from selphlyze.services.demographics import Demographics
from selphlyze.services.questions import option_count, question_count


class QuestionOut(BaseModel):
    id: int
    question: str
    options: List[str]


class QuizAnswers(BaseModel):
    demographics: Demographics
    answers: List[int]
    question_times: List[int] = Field(alias="questionTimes")

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def check_completed_run(self):
        if len(self.answers) != question_count():
            raise ValueError(f"Expected {question_count()} answers, got {len(self.answers)}")
        if len(self.question_times) != len(self.answers):
            raise ValueError("answers and questionTimes must have the same length")
        for index, answer in enumerate(self.answers):
            if not 0 <= answer < option_count(index):
                raise ValueError(f"Answer {answer} out of range for question {index + 1}")
        if any(t < 0 for t in self.question_times):
            raise ValueError("questionTimes must be non-negative")
        return self
