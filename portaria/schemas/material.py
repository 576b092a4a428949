"""
Portaria - Borrowed Material Schemas
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from portaria.models.material import MaterialStatus, BorrowerType
from .base import ViewModel, InputModel


class BorrowedMaterial(ViewModel):
    id: str = ""
    material_name: str = ""
    borrower_type: BorrowerType = BorrowerType.MORADOR
    borrower_name: str = ""
    unit: str = ""
    block: str = ""
    document: str = ""
    phone: str = ""
    loan_date: str = ""
    return_date: str = ""
    status: MaterialStatus = MaterialStatus.EMPRESTADO
    observations: str = ""
    created_at: Optional[datetime] = None


class MaterialCreate(InputModel):
    material_name: str = Field(..., min_length=1, max_length=255)
    borrower_type: BorrowerType = BorrowerType.MORADOR
    borrower_name: str = Field(..., min_length=1, max_length=255)
    unit: str = ""
    block: str = ""
    document: str = ""
    phone: str = ""
    observations: str = ""
