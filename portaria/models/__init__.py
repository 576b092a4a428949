from .resident import Resident
from .package import Package, ReceivedItem, PickupStatus, OperationType
from .material import BorrowedMaterial, MaterialStatus, BorrowerType
from .visitor import Visitor, VisitorStatus
from .employee import Employee, TimeRecord, Occurrence, EmployeeStatus, Shift
from .delivery import Company, DeliveryDriver, DeliveryVisit, DriverStatus

__all__ = [
    "Resident",
    "Package",
    "ReceivedItem",
    "PickupStatus",
    "OperationType",
    "BorrowedMaterial",
    "MaterialStatus",
    "BorrowerType",
    "Visitor",
    "VisitorStatus",
    "Employee",
    "TimeRecord",
    "Occurrence",
    "EmployeeStatus",
    "Shift",
    "Company",
    "DeliveryDriver",
    "DeliveryVisit",
    "DriverStatus"
]
