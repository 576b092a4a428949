"""
Portaria - Session Schemas
"""
from pydantic import BaseModel, Field
from typing import List

from .base import InputModel


class LoginRequest(BaseModel):
    """Login de turno: qualquer nome de funcionario e aceito"""
    name: str = Field(..., min_length=1, max_length=255)


class NavigateRequest(BaseModel):
    page: str


class RefreshRequest(BaseModel):
    scopes: List[str] = ["all"]
    background: bool = False


class GroupSelect(InputModel):
    unit: str
    block: str = ""
