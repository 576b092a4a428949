from .base import ViewModel, InputModel
from .resident import Resident, ResidentCreate
from .package import Package, PackageCreate, ReceivedItem, ReceivedItemCreate, PickupRequest
from .material import BorrowedMaterial, MaterialCreate
from .visitor import Visitor, VisitorCreate
from .employee import (
    Employee,
    EmployeeInput,
    TimeRecord,
    TimeRecordInput,
    Occurrence,
    OccurrenceCreate
)
from .delivery import Company, CompanyInput, DeliveryDriver, DriverInput, DeliveryVisit, VisitInput
from .session import LoginRequest, NavigateRequest, RefreshRequest, GroupSelect

__all__ = [
    "ViewModel",
    "InputModel",
    "Resident",
    "ResidentCreate",
    "Package",
    "PackageCreate",
    "ReceivedItem",
    "ReceivedItemCreate",
    "PickupRequest",
    "BorrowedMaterial",
    "MaterialCreate",
    "Visitor",
    "VisitorCreate",
    "Employee",
    "EmployeeInput",
    "TimeRecord",
    "TimeRecordInput",
    "Occurrence",
    "OccurrenceCreate",
    "Company",
    "CompanyInput",
    "DeliveryDriver",
    "DriverInput",
    "DeliveryVisit",
    "VisitInput",
    "LoginRequest",
    "NavigateRequest",
    "RefreshRequest",
    "GroupSelect"
]
