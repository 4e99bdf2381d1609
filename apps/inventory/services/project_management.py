"""Project management service."""

import logging
from uuid import UUID

from django.db import transaction

from apps.inventory.models import Project

from .exceptions import ProjectNotFoundError, ProjectHasPlotsError

logger = logging.getLogger(__name__)


@transaction.atomic
def delete_project(*, project_id: UUID) -> None:
    """
    Delete a project that has no plots.

    Raises:
        ProjectNotFoundError: If project doesn't exist
        ProjectHasPlotsError: If any plot still references the project
    """
    try:
        project = Project.objects.select_for_update().get(id=project_id)
    except Project.DoesNotExist:
        raise ProjectNotFoundError(f"Project with ID {project_id} not found")

    if project.plots.exists():
        raise ProjectHasPlotsError("Cannot delete project with existing plots")

    project.delete()
    logger.info("Deleted project %s", project_id)
