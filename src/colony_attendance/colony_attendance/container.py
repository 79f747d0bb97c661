from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_WEEKDAYS_ONLY
from .database.connection import DatabaseConnection, DBConfig
from .periods.mysql_period_repository import MySQLPeriodRepository
from .periods.repository import PeriodRepository
from .periods.service import PeriodService
from .reports.service import ReportService
from .students.mysql_roster_repository import MySQLRosterRepository
from .students.repository import RosterRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection | None

    periods_repo: PeriodRepository
    roster_repo: RosterRepository
    attendance_repo: AttendanceRepository

    period_service: PeriodService
    attendance_service: AttendanceService
    report_service: ReportService


def wire(
    *,
    periods_repo: PeriodRepository,
    roster_repo: RosterRepository,
    attendance_repo: AttendanceRepository,
    weekdays_only: bool = DEFAULT_WEEKDAYS_ONLY,
    conn: DatabaseConnection | None = None,
) -> Container:
    """Wire services over any repositories implementing the Protocols."""

    period_service = PeriodService(periods_repo)
    attendance_service = AttendanceService(attendance_repo, roster_repo, period_service)
    report_service = ReportService(periods_repo, roster_repo, attendance_repo, weekdays_only=weekdays_only)

    return Container(
        conn=conn,
        periods_repo=periods_repo,
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        period_service=period_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )


def build_container(*, db_config: dict, weekdays_only: bool = DEFAULT_WEEKDAYS_ONLY) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        periods_repo=MySQLPeriodRepository(conn),
        roster_repo=MySQLRosterRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        weekdays_only=weekdays_only,
        conn=conn,
    )
