from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.date_range import generate_date_range, week_dates
from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_WEEKDAYS_ONLY
from ..core.exceptions import PeriodNotFoundError, ValidationError
from ..periods.model import Period
from ..periods.repository import PeriodRepository
from ..periods.service import PeriodService
from ..students.repository import RosterRepository
from . import exporter
from .aggregator import aggregate
from .model import DenseStatusMap, PeriodReport
from .reconciler import reconcile

logger = logging.getLogger(__name__)


class ReportService:
    """Orchestrates period -> dates -> reconciliation -> summaries.

    Holds no report state; every call reads the repositories again so the
    caller decides when a report is recomputed.
    """

    def __init__(
        self,
        periods: PeriodRepository,
        roster: RosterRepository,
        attendance: AttendanceRepository,
        *,
        weekdays_only: bool = DEFAULT_WEEKDAYS_ONLY,
    ):
        self._periods = periods
        self._roster = roster
        self._attendance = attendance
        self._weekdays_only = bool(weekdays_only)

    def _get_period(self, group_id: str, period_number: int) -> Period:
        period = self._periods.get_period(group_id, int(period_number))
        if not period:
            raise PeriodNotFoundError(group_id, int(period_number))
        return period

    def _report_for(self, group_id: str, period: Period, dates: Sequence[date]) -> PeriodReport:
        roster = tuple(self._roster.fetch_roster(group_id, period.period_number))
        records = self._attendance.fetch_attendance(group_id, dates) if dates else []

        status_map = reconcile(dates, roster, records)
        summaries = aggregate(status_map)

        logger.info(
            "Built report colony=%s period=%s days=%s students=%s records=%s",
            group_id,
            period.period_number,
            len(dates),
            len(roster),
            len(records),
        )
        return PeriodReport(
            period=period,
            date_sequence=tuple(dates),
            roster=roster,
            status_map=status_map,
            summaries=summaries,
        )

    def build_report(self, group_id: str, period_number: int, *, weekdays_only: Optional[bool] = None) -> PeriodReport:
        period = self._get_period(group_id, period_number)

        if weekdays_only is None:
            weekdays_only = self._weekdays_only
        dates = generate_date_range(period.start_date, period.end_date, weekdays_only=weekdays_only)
        return self._report_for(group_id, period, dates)

    def build_week_report(self, group_id: str, period_number: int, day: Optional[date] = None) -> PeriodReport:
        """Monday-Friday of the week containing ``day``, clipped to the period.

        Without ``day`` the week of today is used when today falls inside the
        period, otherwise the first week of the period.
        """
        period = self._get_period(group_id, period_number)
        if day is None:
            day = PeriodService.default_attendance_date(period, today_local())

        dates = [d for d in week_dates(day) if period.contains(d)]
        return self._report_for(group_id, period, dates)

    def export_report_as_text(self, report: PeriodReport) -> str:
        return exporter.export_report(report.status_map, report.summaries, report.date_sequence, report.roster)

    def export_student_report(self, report: PeriodReport, student_id: str) -> str:
        try:
            student = report.student(student_id)
        except KeyError:
            raise ValidationError("El estudiante no pertenece a este período") from None
        return exporter.export_student_report(
            student,
            report.period,
            report.status_map,
            report.summary_for(student_id),
        )

    def export_day_sheet(self, group_id: str, period_number: int, day: date) -> str:
        period = self._get_period(group_id, period_number)
        if not period.contains(day):
            raise ValidationError(f"La fecha {day.isoformat()} está fuera del período {period_number}")

        roster = self._roster.fetch_roster(group_id, period.period_number)
        status_map: DenseStatusMap = reconcile([day], roster, self._attendance.fetch_attendance(group_id, [day]))
        return exporter.export_day_sheet(day, roster, status_map)
