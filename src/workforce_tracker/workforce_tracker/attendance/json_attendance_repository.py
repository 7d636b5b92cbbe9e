from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import KEY_ATTENDANCE
from ..core.enums import AttendanceStatus
from ..database.collection import JsonCollection
from ..database.kv_store import KeyValueStore
from .model import AttendanceEntry, AttendanceId
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _stored_status(row: dict) -> AttendanceStatus:
    value = row.get("status") or AttendanceStatus.PRESENT.value
    try:
        return AttendanceStatus(value)
    except ValueError:
        logger.warning("Attendance %s has unknown status %r; loading as present", row.get("id"), value)
        return AttendanceStatus.PRESENT


def _from_row(row: dict) -> AttendanceEntry:
    return AttendanceEntry(
        entry_id=AttendanceId(str(row["id"])),
        employee_id=str(row["employeeId"]),
        project_id=str(row.get("projectId") or ""),
        work_date=parse_iso_date(row["date"]),
        regular_hours=float(row.get("regularHours") or 0),
        overtime_hours=float(row.get("overtimeHours") or 0),
        created_at=int(row.get("timestamp") or 0),
        created_by=row.get("createdBy"),
        status=_stored_status(row),
    )


def _to_row(a: AttendanceEntry) -> dict:
    return {
        "id": a.entry_id,
        "employeeId": a.employee_id,
        "projectId": a.project_id,
        "date": a.work_date.isoformat(),
        "status": a.status.value,
        "regularHours": a.regular_hours,
        "overtimeHours": a.overtime_hours,
        "timestamp": a.created_at,
        "createdBy": a.created_by,
    }


class JsonAttendanceRepository(AttendanceRepository):
    def __init__(self, store: KeyValueStore):
        self._rows = JsonCollection(
            store,
            KEY_ATTENDANCE,
            to_row=_to_row,
            from_row=_from_row,
            id_of=lambda a: a.entry_id,
        )

    def list_all(self) -> Sequence[AttendanceEntry]:
        return self._rows.all()

    def get_by_id(self, entry_id: str) -> Optional[AttendanceEntry]:
        return self._rows.get(entry_id)

    def add(self, entry: AttendanceEntry) -> None:
        self._rows.append(entry)

    def delete_by_id(self, entry_id: str) -> bool:
        return self._rows.remove(entry_id)
