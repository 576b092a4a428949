"""
Portaria - Exports
CSV da folha de ponto e relatorio impresso (PDF) das visitas de entregadores
"""
import csv
import io
import logging
from typing import Iterable
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

logger = logging.getLogger(__name__)

CSV_DELIMITER = ";"

TIME_RECORD_HEADERS = ["Funcionário", "Data", "Turno", "Entrada", "Saída", "Tipo", "Observações"]
VISIT_HEADERS = ["Entrada", "Entregador", "Empresa", "Pacotes", "Turno", "Observações"]

PRIMARY = "#1e3a8a"
ROW_ALT = "#f1f5f9"


def time_records_csv(records: Iterable) -> str:
    """Folha de ponto em texto delimitado (Excel pt-BR usa ';')"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=CSV_DELIMITER, lineterminator="\n")
    writer.writerow(TIME_RECORD_HEADERS)
    for r in records:
        writer.writerow([
            r.employee_name, r.date, r.shift, r.entry_time,
            r.exit_time, r.type, r.observations
        ])
    return buffer.getvalue()


def _format_day(iso_day: str) -> str:
    if not iso_day:
        return "Todos os dias"
    year, month, day = iso_day.split("-")
    return f"{day}/{month}/{year}"


def delivery_visits_pdf(visits: Iterable, day: str, stats: dict) -> bytes:
    """Tabela filtrada de visitas pronta para impressao"""
    visits = list(visits)
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=1.5*cm,
        rightMargin=1.5*cm,
        topMargin=1.5*cm,
        bottomMargin=1.5*cm,
        title="Visitas de Entregadores"
    )
    styles = getSampleStyleSheet()
    cell = styles["BodyText"]

    story = [
        Paragraph("Visitas de Entregadores", styles["Title"]),
        Paragraph(
            f"Dia: {_format_day(day)} &nbsp;&nbsp; Visitas: {stats.get('visits', 0)} "
            f"&nbsp;&nbsp; Pacotes: {stats.get('packages', 0)}",
            styles["Normal"]
        ),
        Spacer(1, 0.5*cm),
    ]

    data = [VISIT_HEADERS]
    for v in visits:
        data.append([
            v.entry_time,
            Paragraph(escape(v.driver_name or "-"), cell),
            Paragraph(escape(v.company_name or "-"), cell),
            str(v.package_count or 0),
            v.shift or "-",
            Paragraph(escape(v.observations or ""), cell),
        ])

    table = Table(data, colWidths=[3.2*cm, 5*cm, 5*cm, 2*cm, 2.5*cm, 8.5*cm], repeatRows=1)
    style = [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(PRIMARY)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("ALIGN", (3, 1), (3, -1), "CENTER"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.HexColor("#cbd5e1")),
    ]
    for row in range(2, len(data), 2):
        style.append(("BACKGROUND", (0, row), (-1, row), colors.HexColor(ROW_ALT)))
    table.setStyle(TableStyle(style))
    story.append(table)

    if not visits:
        story.append(Spacer(1, 0.5*cm))
        story.append(Paragraph("Nenhuma visita encontrada.", styles["Italic"]))

    doc.build(story)
    logger.info(f"Relatorio de visitas gerado ({len(visits)} linha(s))")
    return buffer.getvalue()
