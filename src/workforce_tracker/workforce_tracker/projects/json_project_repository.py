from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence

from ..core.constants import KEY_PROJECTS
from ..database.collection import JsonCollection
from ..database.kv_store import KeyValueStore
from .model import Project, ProjectId
from .repository import ProjectRepository


def _from_row(row: dict) -> Project:
    return Project(
        project_id=ProjectId(str(row["id"])),
        name=str(row.get("name") or ""),
        location=str(row.get("location") or ""),
    )


def _to_row(p: Project) -> dict:
    return {"id": p.project_id, "name": p.name, "location": p.location}


class JsonProjectRepository(ProjectRepository):
    def __init__(self, store: KeyValueStore, *, seed: Optional[Callable[[], Iterable[Project]]] = None):
        self._rows = JsonCollection(
            store,
            KEY_PROJECTS,
            to_row=_to_row,
            from_row=_from_row,
            id_of=lambda p: p.project_id,
            default=seed,
        )

    def list_all(self) -> Sequence[Project]:
        return self._rows.all()

    def get_by_id(self, project_id: str) -> Optional[Project]:
        return self._rows.get(project_id)

    def add(self, project: Project) -> None:
        self._rows.append(project)

    def delete_by_id(self, project_id: str) -> bool:
        return self._rows.remove(project_id)
