import uuid
from sqlalchemy import Column, String, DateTime, Uuid
from selphlyze.core.clock import utcnow
from selphlyze.core.database import Base, JSONType


class AnalyticsEvent(Base):
    __tablename__ = "analytics"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    event = Column(String, nullable=False, index=True)
    # no foreign key: sessions may be removed out-of-band
    session_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    demographics = Column(JSONType, nullable=True)
    event_metadata = Column("metadata", JSONType, nullable=True)
    timestamp = Column(DateTime, default=utcnow, nullable=False, index=True)
