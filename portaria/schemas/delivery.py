"""
Portaria - Delivery Schemas
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from portaria.models.delivery import DriverStatus
from .base import ViewModel, InputModel


class Company(ViewModel):
    id: str = ""
    name: str = ""
    cnpj: str = ""
    phone: str = ""
    observations: str = ""
    created_at: Optional[datetime] = None


class CompanyInput(InputModel):
    name: str = Field(..., min_length=1, max_length=255)
    cnpj: str = Field("", max_length=18)
    phone: str = ""
    observations: str = ""


class DeliveryDriver(ViewModel):
    id: str = ""
    name: str = ""
    company_id: str = ""
    company_name: str = ""
    phone: str = ""
    cpf: str = ""
    rg: str = ""
    status: DriverStatus = DriverStatus.ATIVO
    observations: str = ""
    created_at: Optional[datetime] = None


class DriverInput(InputModel):
    name: str = Field(..., min_length=1, max_length=255)
    company_id: str = ""
    phone: str = ""
    cpf: str = ""
    rg: str = ""
    status: DriverStatus = DriverStatus.ATIVO
    observations: str = ""


class DeliveryVisit(ViewModel):
    id: str = ""
    driver_id: str = ""
    driver_name: str = ""
    company_name: str = ""
    entry_time: str = ""
    package_count: int = 0
    shift: str = ""
    observations: str = ""
    created_at: Optional[datetime] = None


class VisitInput(InputModel):
    driver_id: str = Field(..., min_length=1)
    driver_name: str = ""
    company_name: str = ""
    package_count: int = Field(0, ge=0)
    shift: str = ""
    observations: str = ""
