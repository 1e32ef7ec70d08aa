from sqlalchemy import Boolean, Column, Date, DateTime, Enum, Integer, String, text
from sqlalchemy.orm import relationship

from src.config.database import Base


class Driver(Base):
    __tablename__ = "driver"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    cpf = Column(String(14), nullable=False, unique=True, index=True)
    phone = Column(String(20), nullable=False)
    email = Column(String(255), nullable=True)
    birth_date = Column(Date, nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(2), nullable=True)
    modality = Column(Enum('pj', 'clt', 'agregado', name='driver_modality_enum'), nullable=False)
    cnh_type = Column(String(5), nullable=False)
    is_apto = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'), nullable=False)

    transports = relationship("Transport", back_populates="driver")
    evaluations = relationship("DriverEvaluation", back_populates="driver")
