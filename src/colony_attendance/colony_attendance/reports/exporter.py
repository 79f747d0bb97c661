"""CSV rendering of attendance reports.

Every export is a pure function of its inputs and returns text prefixed with
a UTF-8 byte-order mark so spreadsheet tools detect the encoding. Quoting is
delegated to the ``csv`` module: fields holding the delimiter, a quote or a
line break are quoted and inner quotes doubled.
"""

from __future__ import annotations

import csv
import io
import re
from datetime import date
from typing import Iterable, Mapping, Sequence

from ..common.date_range import day_label
from ..common.datetime_utils import format_display_date
from ..common.weekday import weekday
from ..core.constants import CSV_BOM, CSV_DELIMITER, CSV_LINE_TERMINATOR
from ..core.enums import AttendanceStatus
from ..periods.model import Period
from ..students.model import Student
from .model import DenseStatusMap, StudentSummary

STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Presente",
    AttendanceStatus.ABSENT: "Ausente",
    AttendanceStatus.UNMARKED: "Sin Marcar",
}

NAME_HEADER = "Apellido y Nombre"
SUMMARY_HEADERS = ("Días Asistidos", "Total de Días", "Porcentaje")


def status_label(status: AttendanceStatus) -> str:
    return STATUS_LABELS[AttendanceStatus(status)]


def format_percentage(value: int) -> str:
    return f"{value}%"


def render_csv(rows: Iterable[Sequence[object]]) -> str:
    out = io.StringIO()
    writer = csv.writer(
        out,
        delimiter=CSV_DELIMITER,
        quotechar='"',
        quoting=csv.QUOTE_MINIMAL,
        lineterminator=CSV_LINE_TERMINATOR,
    )
    for row in rows:
        writer.writerow(["" if field is None else str(field) for field in row])
    return CSV_BOM + out.getvalue()


def export_report(
    status_map: DenseStatusMap,
    summaries: Mapping[str, StudentSummary],
    date_sequence: Sequence[date],
    roster: Sequence[Student],
) -> str:
    """Full period sheet: one row per student, one column per date, then totals."""

    header = [NAME_HEADER, *(day_label(d) for d in date_sequence), *SUMMARY_HEADERS]
    rows: list[list[object]] = [header]
    for student in roster:
        sid = student.student_id
        summary = summaries[sid]
        rows.append(
            [
                student.display_name,
                *(status_label(status_map.status(sid, d)) for d in date_sequence),
                summary.days_present,
                summary.total_days,
                format_percentage(summary.percentage),
            ]
        )
    return render_csv(rows)


def export_student_report(
    student: Student,
    period: Period,
    status_map: DenseStatusMap,
    summary: StudentSummary,
) -> str:
    """Single-student sheet: info block, blank line, then one row per date."""

    rows: list[list[object]] = [
        ["INFORMACIÓN DEL ESTUDIANTE"],
        ["Nombre", student.display_name],
        ["ID", student.external_id or ""],
        ["Temporada", period.season_label or "N/A"],
        ["Período", f"{format_display_date(period.start_date)} a {format_display_date(period.end_date)}"],
        ["Días Asistidos", summary.days_present],
        ["Total Días", summary.total_days],
        ["Porcentaje", format_percentage(summary.percentage)],
        [],
        ["FECHA", "DÍA", "ESTADO"],
    ]
    for d in status_map.dates:
        rows.append(
            [
                format_display_date(d),
                weekday(d.day, d.month, d.year),
                status_label(status_map.status(student.student_id, d)),
            ]
        )
    return render_csv(rows)


def export_day_sheet(day: date, roster: Sequence[Student], status_map: DenseStatusMap) -> str:
    """Attendance of one date: name, external id and status per student."""

    rows: list[list[object]] = [["Nombre", "ID Estudiante", "Estado"]]
    for student in roster:
        rows.append(
            [
                student.display_name,
                student.external_id or "",
                status_label(status_map.status(student.student_id, day)),
            ]
        )
    return render_csv(rows)


def report_filename(name: str, *, prefix: str = "Reporte_Asistencia") -> str:
    safe = re.sub(r"[^a-zA-Z0-9]", "_", name or "") or "Colonia"
    return f"{prefix}_{safe}.csv"
