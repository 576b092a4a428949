"""
Portaria - Package Models
Encomendas e itens recebidos na portaria
"""
import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text

from portaria.database import Base


class PickupStatus(str, enum.Enum):
    """Status de retirada (encomendas e itens recebidos)"""
    AGUARDANDO = "Aguardando Retirada"
    RETIRADA = "Retirada"


class OperationType(str, enum.Enum):
    """Direcao do item recebido"""
    EXTERNO_PARA_MORADOR = "externo_para_morador"
    MORADOR_PARA_EXTERNO = "morador_para_externo"


class Package(Base):
    """Encomenda recebida para um morador"""
    __tablename__ = "packages"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Destino
    unit = Column(String(20), nullable=False, index=True)
    block = Column(String(20), index=True)
    recipient_name = Column(String(255), nullable=False)

    # Dados da encomenda
    type = Column(String(50))
    sender = Column(String(255))
    tracking_code = Column(String(100))
    withdrawal_code = Column(String(20), index=True)
    description = Column(Text)
    observations = Column(Text)

    # Recebimento / retirada (strings ja formatadas)
    received_at = Column(String(20))
    status = Column(String(30), default=PickupStatus.AGUARDANDO.value, index=True)
    picked_up_by = Column(String(255))
    picked_up_at = Column(String(20))

    created_at = Column(DateTime, default=datetime.utcnow, index=True)


class ReceivedItem(Base):
    """
    Item deixado na portaria (externo -> morador ou morador -> externo).
    Nao existe coluna para o codigo de recebimento: ele vai dentro de
    observations no formato "... | Cód: 1234".
    """
    __tablename__ = "received_items"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    operation_type = Column(String(30), default=OperationType.EXTERNO_PARA_MORADOR.value)
    unit = Column(String(20), nullable=False, index=True)
    block = Column(String(20))
    recipient_name = Column(String(255))
    resident_id = Column(String(36))
    left_by = Column(String(255))
    document = Column(String(30))
    description = Column(Text)
    shift = Column(String(20))
    observations = Column(Text)

    received_at = Column(String(20))
    status = Column(String(30), default=PickupStatus.AGUARDANDO.value, index=True)
    picked_up_by = Column(String(255))
    picked_up_at = Column(String(20))

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
