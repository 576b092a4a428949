"""
Portaria - Resident Schemas
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from .base import ViewModel, InputModel


class Resident(ViewModel):
    id: str = ""
    name: str = ""
    unit: str = ""
    block: str = ""
    phone: str = ""
    created_at: Optional[datetime] = None


class ResidentCreate(InputModel):
    name: str = Field(..., min_length=1, max_length=255)
    unit: str = Field(..., min_length=1, max_length=20)
    block: str = Field("", max_length=20)
    phone: str = Field("", max_length=20)
