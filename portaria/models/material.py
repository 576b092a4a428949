"""
Portaria - Borrowed Material Model
"""
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text

from portaria.database import Base


class MaterialStatus(str, enum.Enum):
    EMPRESTADO = "Emprestado"
    DEVOLVIDO = "Devolvido"


class BorrowerType(str, enum.Enum):
    MORADOR = "morador"
    FUNCIONARIO = "funcionario"
    PRESTADOR = "prestador"


class BorrowedMaterial(Base):
    """Material emprestado pela portaria"""
    __tablename__ = "borrowed_materials"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    material_name = Column(String(255), nullable=False)
    borrower_type = Column(String(20), default=BorrowerType.MORADOR.value)
    borrower_name = Column(String(255), nullable=False)
    unit = Column(String(20))
    block = Column(String(20))
    document = Column(String(30))
    phone = Column(String(20))

    loan_date = Column(String(20))
    return_date = Column(String(20))
    status = Column(String(20), default=MaterialStatus.EMPRESTADO.value, index=True)
    observations = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
