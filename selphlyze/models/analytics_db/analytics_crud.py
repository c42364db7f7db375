import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from selphlyze.core.clock import utcnow
from selphlyze.models.analytics_db.analytics_db import AnalyticsEvent
from selphlyze.services.events import EventKind

logger = logging.getLogger(__name__)

MAX_EVENTS = 1000


class AnalyticsError(Exception):
    """Raised when analytics events cannot be written or read"""
    pass


def log_event(
    db: Session,
    event: EventKind,
    session_id: Optional[UUID] = None,
    demographics: Optional[Dict[str, Any]] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> AnalyticsEvent:
    entry = AnalyticsEvent(
        event=EventKind(event).value,
        session_id=session_id,
        demographics=demographics,
        event_metadata=metadata,
    )
    try:
        db.add(entry)
        db.commit()
        db.refresh(entry)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to log analytics event {entry.event}: {e}")
        raise AnalyticsError("Failed to log event") from e
    return entry


def query_events(
    db: Session,
    days: int = 30,
    event: Optional[EventKind] = None,
    now: Optional[datetime] = None,
) -> List[AnalyticsEvent]:
    """Events newer than `days` ago, most recent first, capped at MAX_EVENTS."""
    if days < 0:
        raise ValueError("days must be >= 0")

    try:
        start = (now or utcnow()) - timedelta(days=days)
    except OverflowError:
        # window reaches past the earliest representable date
        start = datetime.min
    query = db.query(AnalyticsEvent).filter(AnalyticsEvent.timestamp >= start)
    if event is not None:
        query = query.filter(AnalyticsEvent.event == EventKind(event).value)

    try:
        return (
            query.order_by(AnalyticsEvent.timestamp.desc())
            .limit(MAX_EVENTS)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch analytics: {e}")
        raise AnalyticsError("Failed to fetch analytics") from e


def _tally(events: Iterable[AnalyticsEvent], field: str) -> Dict[str, int]:
    counts = Counter(
        str(e.demographics[field])
        for e in events
        if isinstance(e.demographics, dict) and field in e.demographics
    )
    return dict(counts)


def summarize(events: List[AnalyticsEvent]) -> dict:
    unique_events = []
    for e in events:
        if e.event not in unique_events:
            unique_events.append(e.event)

    return {
        "totalEvents": len(events),
        "uniqueEvents": unique_events,
        "demographics": {
            "countries": _tally(events, "country"),
            "ageRanges": _tally(events, "age"),
        },
    }
