from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from selphlyze.core.database import get_db
from selphlyze.models.analytics_db.analytics_crud import AnalyticsError, log_event, query_events, summarize
from selphlyze.schemas.analytics.analytics_base import (
    AnalyticsEventIn,
    AnalyticsEventOut,
    AnalyticsResponse,
    SuccessResponse,
)
from selphlyze.services.events import EventKind

analytics_router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


@analytics_router.post("", response_model=SuccessResponse)
def create_event(body: AnalyticsEventIn, db: Session = Depends(get_db)):
    try:
        log_event(
            db,
            event=body.event,
            session_id=body.session_id,
            demographics=body.demographics,
            metadata=body.metadata,
        )
    except AnalyticsError:
        return JSONResponse(status_code=500, content={"error": "Failed to log event"})
    return SuccessResponse(success=True)


@analytics_router.get("", response_model=AnalyticsResponse)
def get_analytics(
    days: int = Query(30, ge=0),
    event: Optional[EventKind] = Query(None),
    db: Session = Depends(get_db)
):
    try:
        events = query_events(db, days=days, event=event)
    except AnalyticsError:
        return JSONResponse(status_code=500, content={"error": "Failed to fetch analytics"})

    return AnalyticsResponse(
        analytics=[AnalyticsEventOut.model_validate(e) for e in events],
        summary=summarize(events),
    )
