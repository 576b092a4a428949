"""
Portaria - Timestamps
Formatos de data/hora exibidos ao usuario.

Cada colecao guarda strings ja formatadas, nao timestamps de maquina:
  - encomendas, itens recebidos, materiais e visitantes: DD/MM/YY HH:mm
  - visitas de entregadores: DD/MM/YYYY HH:mm
  - ocorrencias: "5 de março de 2025 às 14:30"
Os filtros por dia fazem o parse da variante que cada colecao usa.
"""
from datetime import datetime
from typing import Optional, Tuple

MESES = [
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro"
]


def short_stamp(now: datetime) -> str:
    """DD/MM/YY HH:mm"""
    return now.strftime("%d/%m/%y %H:%M")


def long_stamp(now: datetime) -> str:
    """DD/MM/YYYY HH:mm"""
    return now.strftime("%d/%m/%Y %H:%M")


def occurrence_stamp(now: datetime) -> str:
    """Data por extenso usada nas ocorrencias de passagem de turno"""
    return f"{now.day} de {MESES[now.month - 1]} de {now.year} às {now:%H:%M}"


def iso_day(now: datetime) -> str:
    return now.strftime("%Y-%m-%d")


def parse_display_date(text: str) -> Optional[Tuple[int, int, int]]:
    """
    Extrai (dia, mes, ano) da parte de data de "DD/MM/YY HH:mm" ou
    "DD/MM/YYYY HH:mm". Anos com dois digitos sao normalizados (+2000).
    Retorna None se o texto nao estiver no formato esperado.
    """
    if not text:
        return None
    date_part = text.strip().split(" ")[0]
    parts = date_part.split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p) for p in parts)
    except ValueError:
        return None
    if year < 100:
        year += 2000
    return day, month, year


def matches_day(text: str, target: str) -> bool:
    """
    Compara a data exibida com um filtro no formato YYYY-MM-DD.
    Filtro vazio aceita tudo; valor vazio nunca casa com um filtro preenchido.
    """
    if not target:
        return True
    parsed = parse_display_date(text)
    if parsed is None:
        return False
    try:
        t_year, t_month, t_day = (int(p) for p in target.split("-"))
    except ValueError:
        return False
    return parsed == (t_day, t_month, t_year)
