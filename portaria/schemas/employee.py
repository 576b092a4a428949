"""
Portaria - Employee Schemas
Funcionarios, folha de ponto e ocorrencias
"""
from pydantic import Field
from typing import Optional
from datetime import datetime

from portaria.models.employee import EmployeeStatus, Shift
from .base import ViewModel, InputModel


class Employee(ViewModel):
    id: str = ""
    name: str = ""
    cpf: str = ""
    role: str = ""
    shift: str = ""
    status: EmployeeStatus = EmployeeStatus.ATIVO
    entry_time: str = ""
    exit_time: str = ""
    phone: str = ""
    email: str = ""
    admission_date: str = ""
    photo_url: str = ""
    observations: str = ""
    created_at: Optional[datetime] = None


class EmployeeInput(InputModel):
    name: str = Field(..., min_length=1, max_length=255)
    cpf: str = Field("", max_length=14)
    role: str = ""
    shift: str = ""
    status: EmployeeStatus = EmployeeStatus.ATIVO
    entry_time: str = ""
    exit_time: str = ""
    phone: str = ""
    email: str = ""
    admission_date: str = ""
    photo_url: str = ""
    observations: str = ""


class TimeRecord(ViewModel):
    id: str = ""
    employee_id: str = ""
    employee_name: str = ""
    date: str = ""
    shift: str = ""
    entry_time: str = ""
    exit_time: str = ""
    type: str = ""
    observations: str = ""
    created_at: Optional[datetime] = None


class TimeRecordInput(InputModel):
    employee_id: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1)
    shift: Shift = Shift.DIURNO
    entry_time: str = ""
    exit_time: str = ""
    type: str = "normal"
    observations: str = ""


class Occurrence(ViewModel):
    id: str = ""
    outgoing_employee_name: str = ""
    incoming_employee_name: str = ""
    description: str = ""
    timestamp: str = ""
    created_at: Optional[datetime] = None


class OccurrenceCreate(InputModel):
    outgoing_employee_name: str = Field(..., min_length=1)
    incoming_employee_name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
