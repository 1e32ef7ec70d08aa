from sqlalchemy import Column, Integer, String

from src.config.database import Base


class RequestCounter(Base):
    __tablename__ = "request_counter"

    id = Column(String(50), primary_key=True)
    last_number = Column(Integer, nullable=False, default=0)
