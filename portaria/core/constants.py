"""
Portaria - Constants
Menu de navegacao e perfil padrao
"""

# Submenu "Cadastro"
SUBMENU_CADASTRO_ITEMS = [
    {"id": "moradores", "label": "Moradores"},
    {"id": "funcionarios", "label": "Funcionários"},
    {"id": "empresas", "label": "Empresas"},
    {"id": "entregadores", "label": "Entregadores"},
]

# Submenu "Operacional"
SUBMENU_OPERACIONAL_ITEMS = [
    {"id": "ocorrencias", "label": "Ocorrências"},
    {"id": "ponto", "label": "Folha de Ponto"},
]

MENU_ITEMS = [
    {"id": "dashboard", "label": "Dashboard"},
    {"id": "operacional", "label": "Operacional", "children": SUBMENU_OPERACIONAL_ITEMS},
    {"id": "cadastro", "label": "Cadastro", "children": SUBMENU_CADASTRO_ITEMS},
    {"id": "encomendas", "label": "Encomendas"},
    {"id": "recebidos", "label": "Itens Recebidos"},
    {"id": "materiais", "label": "Materiais"},
    {"id": "visitantes", "label": "Visitantes"},
    {"id": "visitas", "label": "Visitas Entregadores"},
]


def navigable_pages() -> set:
    """Ids de paginas navegaveis (itens folha do menu)"""
    pages = set()
    for item in MENU_ITEMS:
        children = item.get("children")
        if children:
            pages.update(child["id"] for child in children)
        else:
            pages.add(item["id"])
    return pages


DEFAULT_PAGE = "dashboard"
NOTEPAD_TARGET_PAGE = "ocorrencias"

ADMIN_NAME = "Administrador"
ROLE_ADMIN = "ADMINISTRADOR"
ROLE_OPERATOR = "OPERADOR"

CURRENT_USER = {
    "name": "Visitante",
    "role": "VISITANTE"
}

# Id sentinela usado para "limpar tudo" (delete where id <> sentinela)
NIL_UUID = "00000000-0000-0000-0000-000000000000"
