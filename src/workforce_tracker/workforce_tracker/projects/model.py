from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

ProjectId = NewType("ProjectId", str)


@dataclass(frozen=True)
class Project:
    """Domain entity: a site that attendance is tagged against."""

    project_id: ProjectId
    name: str
    location: str = ""
