from __future__ import annotations

import csv
import io
from typing import Sequence

from ..core.constants import CSV_COLUMNS
from .engine import EmployeePayroll


def _num(value: float):
    return int(value) if float(value).is_integer() else value


def build_payroll_csv(rows: Sequence[EmployeePayroll]) -> str:
    """One row per employee, numbers exactly as the engine produced them."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)
    for r in rows:
        writer.writerow([r.name, r.title, r.total_days, _num(r.total_ot), _num(r.total_advance), r.net_payable])
    return out.getvalue()
