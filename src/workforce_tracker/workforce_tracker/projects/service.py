from __future__ import annotations

import logging
from typing import Sequence

from ..common.ids import new_id
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import ValidationError
from ..users.model import SessionUser
from ..users.permissions import require_admin
from .model import Project, ProjectId
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, projects: ProjectRepository):
        self._projects = projects

    def list_projects(self) -> Sequence[Project]:
        return self._projects.list_all()

    def create_project(self, *, current_user: SessionUser, name: str, location: str = "") -> Project:
        require_admin(current_user.role)

        project = Project(
            project_id=ProjectId(new_id("proj", {p.project_id for p in self._projects.list_all()})),
            name=require_non_empty(name, "Project name"),
            location=optional_text(location, "Location"),
        )
        self._projects.add(project)
        logger.info("Project %s created", project.project_id)
        return project

    def delete_project(self, *, current_user: SessionUser, project_id: str) -> None:
        require_admin(current_user.role)
        if not self._projects.delete_by_id(project_id):
            raise ValidationError("Project not found")
        logger.info("Project %s deleted; attendance tagged with it is kept", project_id)
