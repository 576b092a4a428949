"""
Portaria - Visitor Model
"""
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text

from portaria.database import Base


class VisitorStatus(str, enum.Enum):
    NO_CONDOMINIO = "no_condominio"
    SAIU = "saiu"


class Visitor(Base):
    """Visitante com entrada/saida registradas"""
    __tablename__ = "visitors"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(255), nullable=False, index=True)
    document = Column(String(30))
    phone = Column(String(20))
    unit = Column(String(20))
    block = Column(String(20))

    # Morador visitado (nome copiado no momento do registro)
    resident_name = Column(String(255))
    resident_id = Column(String(36))

    entry_time = Column(String(20))
    exit_time = Column(String(20))
    status = Column(String(20), default=VisitorStatus.NO_CONDOMINIO.value, index=True)
    observations = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
