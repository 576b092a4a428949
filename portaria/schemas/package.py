"""
Portaria - Package Schemas
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from portaria.models.package import PickupStatus, OperationType
from .base import ViewModel, InputModel


class Package(ViewModel):
    id: str = ""
    unit: str = ""
    block: str = ""
    recipient_name: str = ""
    type: str = ""
    sender: str = ""
    tracking_code: str = ""
    withdrawal_code: str = ""
    description: str = ""
    observations: str = ""
    received_at: str = ""
    status: PickupStatus = PickupStatus.AGUARDANDO
    picked_up_by: str = ""
    picked_up_at: str = ""
    created_at: Optional[datetime] = None


class PackageCreate(InputModel):
    unit: str = Field(..., min_length=1, max_length=20)
    block: str = Field("", max_length=20)
    recipient_name: str = Field(..., min_length=1, max_length=255)
    type: str = ""
    sender: str = ""
    tracking_code: str = ""
    withdrawal_code: str = Field("", max_length=20)
    # Vazio = carimbado no momento do cadastro
    received_at: str = ""
    status: PickupStatus = PickupStatus.AGUARDANDO
    description: str = ""
    observations: str = ""


class ReceivedItem(ViewModel):
    id: str = ""
    operation_type: OperationType = OperationType.EXTERNO_PARA_MORADOR
    unit: str = ""
    block: str = ""
    recipient_name: str = ""
    resident_id: str = ""
    left_by: str = ""
    document: str = ""
    description: str = ""
    shift: str = ""
    observations: str = ""
    received_at: str = ""
    status: PickupStatus = PickupStatus.AGUARDANDO
    picked_up_by: str = ""
    picked_up_at: str = ""
    # Recuperado de observations ("Cód: 1234")
    received_code: Optional[str] = None
    created_at: Optional[datetime] = None


class ReceivedItemCreate(InputModel):
    operation_type: OperationType = OperationType.EXTERNO_PARA_MORADOR
    unit: str = Field(..., min_length=1, max_length=20)
    block: str = Field("", max_length=20)
    recipient_name: str = ""
    resident_id: Optional[str] = None
    left_by: str = Field(..., min_length=1)
    document: str = ""
    description: str = Field(..., min_length=1)
    shift: str = ""
    observations: str = ""
    received_code: str = Field(..., pattern=r"^\d+$")


class PickupRequest(InputModel):
    """Nome de quem retirou"""
    name: str = Field(..., min_length=1, max_length=255)
