"""
Formatos de data/hora e filtro por dia
"""
from datetime import datetime

from portaria.core.timestamps import (
    short_stamp,
    long_stamp,
    occurrence_stamp,
    iso_day,
    parse_display_date,
    matches_day,
)

NOW = datetime(2025, 3, 5, 9, 7)


class TestFormatos:

    def test_short_stamp_usa_ano_com_dois_digitos(self):
        assert short_stamp(NOW) == "05/03/25 09:07"

    def test_long_stamp_usa_ano_com_quatro_digitos(self):
        assert long_stamp(NOW) == "05/03/2025 09:07"

    def test_occurrence_stamp_por_extenso(self):
        assert occurrence_stamp(NOW) == "5 de março de 2025 às 09:07"
        assert occurrence_stamp(datetime(2024, 12, 31, 23, 59)) == "31 de dezembro de 2024 às 23:59"

    def test_iso_day(self):
        assert iso_day(NOW) == "2025-03-05"


class TestParse:

    def test_ano_curto_normalizado(self):
        assert parse_display_date("05/03/25 14:30") == (5, 3, 2025)

    def test_ano_longo(self):
        assert parse_display_date("05/03/2025 14:30") == (5, 3, 2025)

    def test_somente_data(self):
        assert parse_display_date("1/2/24") == (1, 2, 2024)

    def test_texto_invalido_retorna_none(self):
        assert parse_display_date("") is None
        assert parse_display_date("ontem") is None
        assert parse_display_date("aa/bb/cc 10:00") is None
        assert parse_display_date("2025-03-05") is None


class TestMatchesDay:

    def test_filtro_vazio_aceita_tudo(self):
        assert matches_day("", "")
        assert matches_day("05/03/25 14:30", "")

    def test_mesmo_dia_nos_dois_formatos(self):
        assert matches_day("05/03/25 14:30", "2025-03-05")
        assert matches_day("05/03/2025 14:30", "2025-03-05")

    def test_dia_diferente(self):
        assert not matches_day("06/03/25 14:30", "2025-03-05")
        assert not matches_day("05/03/24 14:30", "2025-03-05")

    def test_valor_vazio_nunca_casa_com_filtro(self):
        assert not matches_day("", "2025-03-05")
