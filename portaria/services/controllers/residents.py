"""
Portaria - Residents Controller
"""
from portaria.services.collections import Collection
from .base import CrudController


class ResidentsController(CrudController):
    collection = Collection.RESIDENTS
    search_fields = ("name", "unit", "block")
    save_error = "Erro ao salvar morador"
    delete_error = "Erro ao excluir morador"
