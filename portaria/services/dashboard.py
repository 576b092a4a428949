"""
Portaria - Dashboard
Resumo somente-leitura sobre as colecoes carregadas
"""
from portaria.models import PickupStatus, VisitorStatus, MaterialStatus, EmployeeStatus
from .collections import Collection
from .store import CollectionStore


def dashboard_summary(store: CollectionStore, recent_limit: int = 5) -> dict:
    packages = store.snapshot(Collection.PACKAGES)
    visitors = store.snapshot(Collection.VISITORS)
    materials = store.snapshot(Collection.MATERIALS)
    employees = store.snapshot(Collection.EMPLOYEES)
    occurrences = store.snapshot(Collection.OCCURRENCES)

    return {
        "packages": {
            "total": len(packages),
            "pending": sum(1 for p in packages if p.status == PickupStatus.AGUARDANDO),
            "picked_up": sum(1 for p in packages if p.status == PickupStatus.RETIRADA),
        },
        "visitors_inside": sum(1 for v in visitors if v.status == VisitorStatus.NO_CONDOMINIO),
        "materials_on_loan": sum(1 for m in materials if m.status == MaterialStatus.EMPRESTADO),
        "employees": {
            "total": len(employees),
            "active": sum(1 for e in employees if e.status == EmployeeStatus.ATIVO),
        },
        "recent_occurrences": list(occurrences[:recent_limit]),
    }
