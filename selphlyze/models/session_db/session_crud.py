import logging
from typing import Mapping, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from selphlyze.core.clock import to_naive_utc
from selphlyze.models.analytics_db.analytics_db import AnalyticsEvent
from selphlyze.models.session_db.session_db import TestSession
from selphlyze.schemas.session.session_base import ClientMetadata, SaveResultsRequest
from selphlyze.services.events import EventKind

logger = logging.getLogger(__name__)

IP_VISIBLE_CHARS = 12
IP_MASK = "***"
UNKNOWN = "unknown"


class ResultStoreError(Exception):
    """Raised when a completed session could not be persisted"""
    pass


def mask_ip(address: str) -> str:
    return address[:IP_VISIBLE_CHARS] + IP_MASK


def client_ip(headers: Mapping[str, str]) -> str:
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return headers.get("x-real-ip") or UNKNOWN


def client_metadata(headers: Mapping[str, str]) -> ClientMetadata:
    return ClientMetadata(
        ip_address=mask_ip(client_ip(headers)),
        user_agent=headers.get("user-agent") or UNKNOWN,
    )


def save_test_session(db: Session, submission: SaveResultsRequest, client: ClientMetadata) -> UUID:
    demographics = submission.demographics.model_dump()

    test_session = TestSession(
        self_code=submission.self_code,
        demographics=demographics,
        answers=list(submission.answers),
        question_times=list(submission.question_times),
        total_time=submission.total_time,
        analysis=submission.analysis.model_dump(by_alias=True),
        ip_address=client.ip_address,
        user_agent=client.user_agent,
        completed_at=to_naive_utc(submission.completed_at),
    )

    try:
        db.add(test_session)
        db.flush()

        db.add(AnalyticsEvent(
            event=EventKind.test_completed.value,
            session_id=test_session.id,
            demographics={
                "age": demographics["age"],
                "gender": demographics["gender"],
                "country": demographics["country"],
            },
            event_metadata={
                "totalTime": submission.total_time,
                "questionsAnswered": len(submission.answers),
            },
        ))
        # session and its analytics event land together or not at all
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to save test session: {e}")
        raise ResultStoreError("Failed to save results") from e

    logger.info(f"Saved test session {test_session.id} ({submission.self_code})")
    return test_session.id


def get_test_session(db: Session, session_id: UUID) -> Optional[TestSession]:
    return db.query(TestSession).filter(TestSession.id == session_id).first()
