"""
AI Governance Policy Generator - SQLAlchemy Database Models
"""
from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, DateTime, JSON

from ..database import Base


class PolicyDB(Base):
    """Generated policy document - written once, never updated."""
    __tablename__ = "policies"

    id = Column(String(36), primary_key=True)  # UUID
    word_count = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc), index=True)

    # Full document in PolicyDocument.to_dict() form
    document = Column(JSON, nullable=False)
