from sqlalchemy import Boolean, Column, DateTime, Integer, Numeric, String, func, text
from sqlalchemy.orm import relationship

from src.config.database import Base


class EvaluationCriteria(Base):
    __tablename__ = "evaluation_criteria"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    weight = Column(Numeric(5, 2), nullable=False)
    penalty_leve = Column(Numeric(5, 2), nullable=False, default=10)
    penalty_medio = Column(Numeric(5, 2), nullable=False, default=50)
    penalty_grave = Column(Numeric(5, 2), nullable=False, default=100)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'), nullable=False)
    updated_at = Column(
        DateTime,
        server_default=text('CURRENT_TIMESTAMP'),
        onupdate=func.now(),
        nullable=False,
    )

    scores = relationship("DriverEvaluationScore", back_populates="criterion")
