from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from pydantic import AliasChoices, BaseModel, Field

from selphlyze.services.events import EventKind


Scalar = Union[str, int, float, bool, None]


class AnalyticsEventIn(BaseModel):
    event: EventKind
    session_id: Optional[UUID] = Field(default=None, alias="sessionId")
    demographics: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Scalar]] = None

    class Config:
        populate_by_name = True


class AnalyticsEventOut(BaseModel):
    # built from ORM rows; "metadata" is reserved on declarative models
    id: UUID
    event: str
    session_id: Optional[UUID] = Field(
        default=None,
        validation_alias=AliasChoices("session_id", "sessionId"),
        serialization_alias="sessionId",
    )
    demographics: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = Field(
        default=None,
        validation_alias=AliasChoices("event_metadata", "metadata"),
    )
    timestamp: datetime

    class Config:
        from_attributes = True


class DemographicsSummary(BaseModel):
    countries: Dict[str, int]
    age_ranges: Dict[str, int] = Field(alias="ageRanges")

    class Config:
        populate_by_name = True


class AnalyticsSummary(BaseModel):
    total_events: int = Field(alias="totalEvents")
    unique_events: List[str] = Field(alias="uniqueEvents")
    demographics: DemographicsSummary

    class Config:
        populate_by_name = True


class AnalyticsResponse(BaseModel):
    analytics: List[AnalyticsEventOut]
    summary: AnalyticsSummary


class SuccessResponse(BaseModel):
    success: bool = True
