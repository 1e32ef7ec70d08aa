from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import relationship

from src.config.database import Base


class Transport(Base):
    __tablename__ = "transport"

    id = Column(Integer, primary_key=True, autoincrement=True)
    request_number = Column(String(20), nullable=False, unique=True, index=True)
    vehicle_chassi = Column(String(50), nullable=False)
    driver_id = Column(Integer, ForeignKey("driver.id"), nullable=True, index=True)
    status = Column(
        Enum('pendente', 'em_transito', 'entregue', 'cancelado', name='transport_status_enum'),
        nullable=False,
        default='pendente',
        index=True,
    )
    delivery_date = Column(Date, nullable=True)
    delivered_at = Column(DateTime, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=text('CURRENT_TIMESTAMP'), nullable=False)

    driver = relationship("Driver", back_populates="transports")
    evaluation = relationship("DriverEvaluation", back_populates="transport", uselist=False)
