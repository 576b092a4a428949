"""
Portaria - Employees Controller
"""
from portaria.models.employee import EmployeeStatus
from portaria.services.collections import Collection
from .base import CrudController


class EmployeesController(CrudController):
    collection = Collection.EMPLOYEES
    search_fields = ("name", "cpf", "role")
    status_filters = {status.value: status for status in EmployeeStatus}
    save_error = "Erro ao salvar funcionário"
    delete_error = "Erro ao excluir funcionário"
