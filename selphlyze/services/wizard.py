"""
Quiz session wizard.

The wizard is a pure reducer: ``reduce(state, action)`` returns the next
``QuizState`` and never mutates its input. Every action that depends on the
clock carries ``now_ms`` so that a run can be replayed deterministically.
"""
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from selphlyze.services.demographics import Demographics
from selphlyze.services.questions import QUESTION_BANK, Question


@dataclass(frozen=True)
class CompletedQuizResult:
    answers: Tuple[int, ...]
    question_times_ms: Tuple[int, ...]
    total_time_ms: int
    demographics: Demographics
    completed_at_ms: int


@dataclass(frozen=True)
class QuizState:
    questions: Tuple[Question, ...]
    demographics: Demographics
    current_index: int
    answers: Tuple[int, ...]
    question_times_ms: Tuple[int, ...]
    session_started_at_ms: int
    question_started_at_ms: int
    candidate: Optional[int] = None
    result: Optional[CompletedQuizResult] = None

    @property
    def is_completed(self) -> bool:
        return self.result is not None

    @property
    def current_question(self) -> Optional[Question]:
        if self.is_completed:
            return None
        return self.questions[self.current_index]


@dataclass(frozen=True)
class SelectOption:
    option: int


@dataclass(frozen=True)
class Advance:
    now_ms: int


@dataclass(frozen=True)
class Back:
    now_ms: int


Action = Union[SelectOption, Advance, Back]


def start_quiz(
    demographics: Demographics,
    now_ms: int,
    questions: Tuple[Question, ...] = QUESTION_BANK,
) -> QuizState:
    if not questions:
        raise ValueError("A quiz needs at least one question")
    return QuizState(
        questions=tuple(questions),
        demographics=demographics,
        current_index=0,
        answers=(),
        question_times_ms=(),
        session_started_at_ms=now_ms,
        question_started_at_ms=now_ms,
    )


def _put(values: Tuple[int, ...], index: int, value: int) -> Tuple[int, ...]:
    # Indices are committed in order, so index is at most len(values)
    if index < len(values):
        return values[:index] + (value,) + values[index + 1:]
    return values + (value,)


def _committed(values: Tuple[int, ...], index: int) -> Optional[int]:
    return values[index] if index < len(values) else None


def select_option(state: QuizState, option: int) -> QuizState:
    if state.is_completed:
        return state
    if not 0 <= option < len(state.current_question.options):
        return state
    return replace(state, candidate=option)


def advance(state: QuizState, now_ms: int) -> QuizState:
    if state.is_completed or state.candidate is None:
        return state

    index = state.current_index
    elapsed = max(0, now_ms - state.question_started_at_ms)
    answers = _put(state.answers, index, state.candidate)
    times = _put(state.question_times_ms, index, elapsed)

    if index < len(state.questions) - 1:
        next_index = index + 1
        return replace(
            state,
            current_index=next_index,
            answers=answers,
            question_times_ms=times,
            question_started_at_ms=now_ms,
            candidate=_committed(answers, next_index),
        )

    result = CompletedQuizResult(
        answers=answers,
        question_times_ms=times,
        total_time_ms=max(now_ms - state.session_started_at_ms, sum(times)),
        demographics=state.demographics,
        completed_at_ms=now_ms,
    )
    return replace(
        state,
        answers=answers,
        question_times_ms=times,
        candidate=None,
        result=result,
    )


def back(state: QuizState, now_ms: int) -> QuizState:
    if state.is_completed or state.current_index == 0:
        return state
    previous = state.current_index - 1
    return replace(
        state,
        current_index=previous,
        question_started_at_ms=now_ms,
        candidate=_committed(state.answers, previous),
    )


def reduce(state: QuizState, action: Action) -> QuizState:
    if isinstance(action, SelectOption):
        return select_option(state, action.option)
    if isinstance(action, Advance):
        return advance(state, action.now_ms)
    if isinstance(action, Back):
        return back(state, action.now_ms)
    raise TypeError(f"Unknown wizard action: {action!r}")
