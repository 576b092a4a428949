from .session import router as session_router
from .sync import router as sync_router
from .residents import router as residents_router
from .packages import router as packages_router
from .received_items import router as received_items_router
from .materials import router as materials_router
from .visitors import router as visitors_router
from .employees import router as employees_router
from .occurrences import router as occurrences_router
from .time_records import router as time_records_router
from .companies import router as companies_router
from .delivery import drivers_router as delivery_drivers_router, visits_router as delivery_visits_router

__all__ = [
    "session_router",
    "sync_router",
    "residents_router",
    "packages_router",
    "received_items_router",
    "materials_router",
    "visitors_router",
    "employees_router",
    "occurrences_router",
    "time_records_router",
    "companies_router",
    "delivery_drivers_router",
    "delivery_visits_router"
]
