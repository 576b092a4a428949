"""
Portaria - Companies Controller
"""
from portaria.services.collections import Collection
from .base import CrudController


class CompaniesController(CrudController):
    collection = Collection.COMPANIES
    search_fields = ("name", "cnpj")
    save_error = "Erro ao salvar empresa"
