from sqlalchemy import Column, Enum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from src.config.database import Base

class DriverEvaluationScore(Base):
    __tablename__ = "driver_evaluation_score"

    id = Column(Integer, primary_key=True, autoincrement=True)
    evaluation_id = Column(Integer, ForeignKey("driver_evaluation.id"), nullable=False, index=True)
    criterion_id = Column(Integer, ForeignKey("evaluation_criteria.id"), nullable=False, index=True)
    # null for rows recorded with a raw 0-100 score
    severity = Column(
        Enum('sem_ocorrencia', 'leve', 'medio', 'grave', name='severity_enum'),
        nullable=True,
    )
    score = Column(Numeric(5, 2), nullable=False)
    weight = Column(Numeric(5, 2), nullable=False)
    criterion_name = Column(String(255), nullable=False)

    evaluation = relationship("DriverEvaluation", back_populates="scores")
    criterion = relationship("EvaluationCriteria", back_populates="scores")
