from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, Text, text
from sqlalchemy.orm import relationship

from src.config.database import Base


class DriverEvaluation(Base):
    __tablename__ = "driver_evaluation"

    id = Column(Integer, primary_key=True, autoincrement=True)
    transport_id = Column(Integer, ForeignKey("transport.id"), nullable=False, unique=True)
    driver_id = Column(Integer, ForeignKey("driver.id"), nullable=False, index=True)
    evaluator_id = Column(Integer, ForeignKey("user.id"), nullable=True)
    had_incident = Column(Boolean, nullable=False, default=False)
    incident_description = Column(Text, nullable=True)
    average_score = Column(Numeric(5, 2), nullable=False)
    # authoritative value: the manual score when overridden, else the computed one
    weighted_score = Column(Numeric(5, 2), nullable=False)
    computed_weighted_score = Column(Numeric(5, 2), nullable=False)
    is_manual_override = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'), nullable=False)

    transport = relationship("Transport", back_populates="evaluation")
    driver = relationship("Driver", back_populates="evaluations")
    scores = relationship(
        "DriverEvaluationScore",
        back_populates="evaluation",
        cascade="all, delete-orphan",
        order_by="DriverEvaluationScore.id",
    )
