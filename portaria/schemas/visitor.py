"""
Portaria - Visitor Schemas
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from portaria.models.visitor import VisitorStatus
from .base import ViewModel, InputModel


class Visitor(ViewModel):
    id: str = ""
    name: str = ""
    document: str = ""
    phone: str = ""
    unit: str = ""
    block: str = ""
    resident_name: str = ""
    resident_id: str = ""
    entry_time: str = ""
    exit_time: str = ""
    status: VisitorStatus = VisitorStatus.NO_CONDOMINIO
    observations: str = ""
    created_at: Optional[datetime] = None


class VisitorCreate(InputModel):
    name: str = Field(..., min_length=1, max_length=255)
    document: str = ""
    phone: str = ""
    unit: str = Field(..., min_length=1, max_length=20)
    block: str = ""
    resident_name: str = ""
    resident_id: Optional[str] = None
    observations: str = ""
