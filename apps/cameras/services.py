"""
Camera Services Module
======================

Business logic for installing surveillance cameras on sold property and
for the owner-facing camera feed.

Classes:
    CameraAssignmentService: Bulk camera assignment and camera queries.

Example:
    Installing two cameras on a sold land::

        from apps.cameras.services import CameraAssignmentService

        cameras = CameraAssignmentService.assign_land_cameras(
            land_id=land.id,
            cameras=[
                {'ip_address': '10.0.0.21'},
                {'ip_address': '10.0.0.22', 'label': 'Gate'},
            ],
        )
"""

import logging

from django.db import transaction

from apps.inventory.models import Plot, Land, PropertyStatus
from .models import Camera, LandCamera
from .exceptions import PlotNotFoundError, LandNotFoundError, OwnerRequiredError

logger = logging.getLogger(__name__)


class CameraAssignmentService:
    """
    Service for attaching cameras to plots and lands.

    A camera can only be attached to property that already has an owner,
    because the camera feed is shown to that owner.
    """

    @staticmethod
    @transaction.atomic
    def assign_plot_cameras(plot_id, cameras):
        """
        Create cameras for a plot in one transaction.

        Args:
            plot_id (UUID): Target plot.
            cameras (list[dict]): Items with ``ip_address`` and an optional
                ``label``.

        Returns:
            list[Camera]: The created cameras, in input order.

        Raises:
            PlotNotFoundError: If the plot does not exist.
            OwnerRequiredError: If the plot has no owner.
        """
        try:
            plot = Plot.objects.select_for_update().get(id=plot_id)
        except Plot.DoesNotExist:
            raise PlotNotFoundError()

        if plot.owner_id is None:
            raise OwnerRequiredError('Plot must be assigned to an owner first.')

        created = [
            Camera.objects.create(
                plot=plot,
                ip_address=camera['ip_address'],
                label=camera.get('label') or '',
            )
            for camera in cameras
        ]
        logger.info("Assigned %d cameras to plot %s", len(created), plot.id)
        return created

    @staticmethod
    @transaction.atomic
    def assign_land_cameras(land_id, cameras):
        """
        Create cameras for a land in one transaction.

        Args:
            land_id (UUID): Target land.
            cameras (list[dict]): Items with ``ip_address`` and an optional
                ``label``.

        Returns:
            list[LandCamera]: The created cameras, in input order.

        Raises:
            LandNotFoundError: If the land does not exist.
            OwnerRequiredError: If the land has no owner.
        """
        try:
            land = Land.objects.select_for_update().get(id=land_id)
        except Land.DoesNotExist:
            raise LandNotFoundError()

        if land.owner_id is None:
            raise OwnerRequiredError('Land must be assigned to an owner first.')

        created = [
            LandCamera.objects.create(
                land=land,
                ip_address=camera['ip_address'],
                label=camera.get('label') or '',
            )
            for camera in cameras
        ]
        logger.info("Assigned %d cameras to land %s", len(created), land.id)
        return created

    @staticmethod
    def get_owner_lands_with_cameras(owner_id):
        """
        Return the SOLD lands of an owner with their cameras, newest first.

        Args:
            owner_id (UUID): Owner of the lands.

        Returns:
            QuerySet[Land]: Lands with ``plot`` selected and ``cameras``
            prefetched.
        """
        return (
            Land.objects
            .filter(owner_id=owner_id, status=PropertyStatus.SOLD)
            .select_related('plot')
            .prefetch_related('cameras')
            .order_by('-created_at')
        )

    @staticmethod
    def get_camera_feed(user):
        """
        Flatten every camera on the user's plots and lands into one list.

        Each item carries ``type`` (``'plot'`` or ``'land'``), the property
        title and location, the camera address and label, and the project
        name and location. Land items also carry ``number`` and ``size``.

        Args:
            user (User): Owner of the property.

        Returns:
            list[dict]: Plot cameras first, then land cameras.
        """
        plots = (
            Plot.objects
            .filter(owner=user)
            .select_related('project')
            .prefetch_related('cameras')
        )
        lands = (
            Land.objects
            .filter(owner=user)
            .select_related('plot__project')
            .prefetch_related('cameras')
        )

        feed = []
        for plot in plots:
            for camera in plot.cameras.all():
                feed.append({
                    'id': camera.id,
                    'type': 'plot',
                    'title': plot.title,
                    'location': plot.location,
                    'ip_address': camera.ip_address,
                    'label': camera.label,
                    'project': {
                        'name': plot.project.name,
                        'location': plot.project.location,
                    },
                })
        for land in lands:
            for camera in land.cameras.all():
                feed.append({
                    'id': camera.id,
                    'type': 'land',
                    'title': land.plot.title,
                    'location': land.plot.location,
                    'number': land.number,
                    'size': land.size,
                    'ip_address': camera.ip_address,
                    'label': camera.label,
                    'project': {
                        'name': land.plot.project.name,
                        'location': land.plot.project.location,
                    },
                })
        return feed
