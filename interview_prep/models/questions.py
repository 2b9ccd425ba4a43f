# interview_prep/models/questions.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index, func
from interview_prep.db.base import Base

class InterviewQuestion(Base):
    __tablename__ = "interview_questions"

    id = Column(String(64), primary_key=True, index=True)
    session_id = Column(String(64), ForeignKey("interview_sessions.id"), nullable=False, index=True)
    order_index = Column(Integer, nullable=False)
    question = Column(Text, nullable=False)
    ideal_answer = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_interview_questions_session_id_order_index", "session_id", "order_index"),
    )
