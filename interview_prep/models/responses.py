# interview_prep/models/responses.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, func
from interview_prep.db.base import Base

class InterviewResponse(Base):
    __tablename__ = "interview_responses"

    id = Column(String(64), primary_key=True, index=True)
    session_id = Column(String(64), ForeignKey("interview_sessions.id"), nullable=False, index=True)
    question_id = Column(String(64), ForeignKey("interview_questions.id"), nullable=False)
    answer = Column(Text, nullable=False)
    score = Column(Integer, nullable=True)
    feedback = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_interview_responses_session_id_question_id", "session_id", "question_id"),
    )
