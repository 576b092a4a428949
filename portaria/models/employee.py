"""
Portaria - Employee Models
Funcionarios, folha de ponto e ocorrencias de passagem de turno
"""
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text

from portaria.database import Base


class EmployeeStatus(str, enum.Enum):
    ATIVO = "ativo"
    INATIVO = "inativo"
    FERIAS = "ferias"


class Shift(str, enum.Enum):
    DIURNO = "diurno"
    NOTURNO = "noturno"


class Employee(Base):
    """Funcionario do condominio"""
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(255), nullable=False, index=True)
    cpf = Column(String(14), index=True)
    role = Column(String(100))
    shift = Column(String(20))
    status = Column(String(20), default=EmployeeStatus.ATIVO.value)

    # Escala
    entry_time = Column(String(5))
    exit_time = Column(String(5))

    phone = Column(String(20))
    email = Column(String(255))
    admission_date = Column(String(10))
    photo_url = Column(Text)
    observations = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)


class TimeRecord(Base):
    """Registro de ponto (nome do funcionario copiado no momento da gravacao)"""
    __tablename__ = "time_records"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    employee_id = Column(String(36), index=True)
    employee_name = Column(String(255))
    date = Column(String(10))
    shift = Column(String(20))
    entry_time = Column(String(5))
    exit_time = Column(String(5))
    type = Column(String(30))
    observations = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)


class Occurrence(Base):
    """Ocorrencia registrada na passagem de turno"""
    __tablename__ = "occurrences"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    outgoing_employee_name = Column(String(255))
    incoming_employee_name = Column(String(255))
    description = Column(Text, nullable=False)

    # Data por extenso ("5 de março de 2025 às 14:30")
    timestamp = Column(String(60))

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
