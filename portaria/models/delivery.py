"""
Portaria - Delivery Models
Empresas, entregadores e visitas de entregadores
"""
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, Integer

from portaria.database import Base


class DriverStatus(str, enum.Enum):
    ATIVO = "ativo"
    INATIVO = "inativo"
    BLOQUEADO = "bloqueado"


class Company(Base):
    """Empresa de entregas / transportadora"""
    __tablename__ = "companies"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(255), nullable=False, index=True)
    cnpj = Column(String(18))
    phone = Column(String(20))
    observations = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)


class DeliveryDriver(Base):
    """Entregador (company_name e copiado no momento da gravacao)"""
    __tablename__ = "delivery_drivers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    name = Column(String(255), nullable=False, index=True)
    company_id = Column(String(36))
    company_name = Column(String(255))
    phone = Column(String(20))
    cpf = Column(String(14))
    rg = Column(String(20))
    status = Column(String(20), default=DriverStatus.ATIVO.value)
    observations = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)


class DeliveryVisit(Base):
    """Visita de entregador (nomes copiados no momento da gravacao)"""
    __tablename__ = "delivery_visits"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    driver_id = Column(String(36), index=True)
    driver_name = Column(String(255))
    company_name = Column(String(255))
    entry_time = Column(String(20))
    package_count = Column(Integer, default=0)
    shift = Column(String(20))
    observations = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
