from sqlalchemy import Column, Integer, String, Text, Enum
from sqlalchemy.orm import relationship

from src.config.database import Base

class UserRole(Base):
    __tablename__ = 'user_role'

    id = Column(Integer, primary_key=True, autoincrement=True)
    role_name = Column(
        Enum('admin', 'operador', 'visualizador', name='role_name_enum'),
        nullable=False,
        unique=True,
    )
    description = Column(Text, nullable=True)

    users = relationship('User', back_populates='role')
