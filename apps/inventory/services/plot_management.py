"""
Plot management service.

Every plot carries a QR code of its own id, generated right after the
row is first saved.
"""

import logging
from uuid import UUID

from django.db import transaction

from apps.inventory.models import Plot, Project

from .exceptions import ProjectNotFoundError
from .qr_codes import QRCodeGenerator

logger = logging.getLogger(__name__)


@transaction.atomic
def create_plot(*, project_id: UUID, **fields) -> Plot:
    """
    Create a plot in a project and attach its QR code.

    Args:
        project_id: UUID of the parent project
        **fields: Validated Plot fields (title, price, status, ...)

    Returns:
        Created Plot with ``qr_url`` populated

    Raises:
        ProjectNotFoundError: If project doesn't exist
    """
    try:
        project = Project.objects.get(id=project_id)
    except Project.DoesNotExist:
        raise ProjectNotFoundError(f"Project with ID {project_id} not found")

    plot = Plot.objects.create(project=project, **fields)

    # The id only exists after the insert
    plot.qr_url = QRCodeGenerator.data_url(str(plot.id))
    plot.save(update_fields=['qr_url'])

    logger.info("Created plot %s in project %s", plot.id, project.id)
    return plot


@transaction.atomic
def update_plot(*, plot: Plot, project_id: UUID = None, **fields) -> Plot:
    """
    Update a plot, optionally moving it to another project.

    Raises:
        ProjectNotFoundError: If the new project doesn't exist
    """
    if project_id is not None:
        try:
            plot.project = Project.objects.get(id=project_id)
        except Project.DoesNotExist:
            raise ProjectNotFoundError(f"Project with ID {project_id} not found")

    for field, value in fields.items():
        setattr(plot, field, value)

    if not plot.qr_url:
        plot.qr_url = QRCodeGenerator.data_url(str(plot.id))

    plot.save()
    return plot
