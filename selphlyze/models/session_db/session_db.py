import uuid
from sqlalchemy import Column, String, Integer, DateTime, Text, Uuid
from selphlyze.core.clock import utcnow
from selphlyze.core.database import Base, JSONType


class TestSession(Base):
    __tablename__ = "test_sessions"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        unique=True,
        index=True
    )

    self_code = Column(String(6), nullable=False, index=True)
    demographics = Column(JSONType, nullable=False)  # { age, gender, country }
    answers = Column(JSONType, nullable=False)
    question_times = Column(JSONType, nullable=False)
    total_time = Column(Integer, nullable=False)
    analysis = Column(JSONType, nullable=False)
    ip_address = Column(String, nullable=False)  # masked, never the full address
    user_agent = Column(Text, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
