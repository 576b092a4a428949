from .base import AlertBox, CrudController, ALL_FILTER
from .residents import ResidentsController
from .packages import PackagesController
from .received_items import ReceivedItemsController
from .materials import MaterialsController
from .visitors import VisitorsController
from .employees import EmployeesController
from .occurrences import OccurrencesController
from .time_records import TimeRecordsController
from .companies import CompaniesController
from .delivery import DeliveryDriversController, DeliveryVisitsController

__all__ = [
    "AlertBox",
    "CrudController",
    "ALL_FILTER",
    "ResidentsController",
    "PackagesController",
    "ReceivedItemsController",
    "MaterialsController",
    "VisitorsController",
    "EmployeesController",
    "OccurrencesController",
    "TimeRecordsController",
    "CompaniesController",
    "DeliveryDriversController",
    "DeliveryVisitsController"
]
