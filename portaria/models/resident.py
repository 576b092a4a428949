"""
Portaria - Resident Model
Cadastro de moradores (registro, sem status)
"""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime

from portaria.database import Base


class Resident(Base):
    """Morador de uma unidade"""
    __tablename__ = "residents"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(255), nullable=False, index=True)
    unit = Column(String(20), nullable=False, index=True)
    block = Column(String(20))
    phone = Column(String(20))

    created_at = Column(DateTime, default=datetime.utcnow)
