from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core.enums import AuditSeverity


@dataclass(frozen=True)
class AuditFinding:
    severity: AuditSeverity
    type: str
    description: str
    affected_entry_ids: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class AuditReport:
    summary: str
    findings: List[AuditFinding]

    @classmethod
    def from_payload(cls, payload: dict) -> "AuditReport":
        """Build from the model's JSON answer; raises ValueError when malformed."""
        if not isinstance(payload, dict) or "summary" not in payload or "findings" not in payload:
            raise ValueError("Audit response is missing summary or findings")

        findings = []
        for f in payload["findings"] or []:
            try:
                severity = AuditSeverity(str(f.get("severity", "")).strip().lower())
            except ValueError:
                severity = AuditSeverity.LOW
            findings.append(
                AuditFinding(
                    severity=severity,
                    type=str(f.get("type") or ""),
                    description=str(f.get("description") or ""),
                    affected_entry_ids=[str(i) for i in f.get("affectedEntryIds") or []],
                )
            )
        return cls(summary=str(payload["summary"]), findings=findings)


@dataclass(frozen=True)
class RepeatedEntryGroup:
    """Attendance rows sharing employee, date and project."""

    employee_id: str
    employee_name: str
    work_date: str
    project_id: str
    entry_ids: List[str]
