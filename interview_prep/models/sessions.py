# interview_prep/models/sessions.py
from sqlalchemy import Column, Integer, String, Text, DateTime, Index, func
from interview_prep.db.base import Base

class InterviewSession(Base):
    __tablename__ = "interview_sessions"

    id = Column(String(64), primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)  # 생성 후 변경 불가
    title = Column(Text, nullable=False)
    job_title = Column(Text, nullable=True)
    company_name = Column(Text, nullable=True)
    mode = Column(String(50), nullable=True)
    scheduled_at = Column(DateTime(timezone=True), nullable=True)
    duration_minutes = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_interview_sessions_user_id_created_at", "user_id", "created_at"),
    )
