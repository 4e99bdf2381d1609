"""
Land management service.

Handles assigning lands to clients and the owner-facing land queries.
"""

import logging
from typing import List
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.accounts.models import User, UserRole
from apps.inventory.models import Land, Plot, PropertyStatus

from .exceptions import (
    PlotNotFoundError,
    LandNotFoundError,
    ClientNotFoundError,
    InvalidAssigneeError,
)

logger = logging.getLogger(__name__)


def create_land(*, plot_id: UUID, **fields) -> Land:
    """
    Create a land inside a plot.

    Raises:
        PlotNotFoundError: If plot doesn't exist
    """
    try:
        plot = Plot.objects.get(id=plot_id)
    except Plot.DoesNotExist:
        raise PlotNotFoundError(f"Plot with ID {plot_id} not found")

    return Land.objects.create(plot=plot, **fields)


@transaction.atomic
def assign_land(*, land_id: UUID, client_id: UUID) -> Land:
    """
    Sell a land to a client.

    Sets the owner, marks the land SOLD and stamps ``sold_at``.

    Args:
        land_id: UUID of the land
        client_id: UUID of the buying client

    Returns:
        Updated Land instance

    Raises:
        LandNotFoundError: If land doesn't exist
        ClientNotFoundError: If client doesn't exist
        InvalidAssigneeError: If the user is not a client
    """
    try:
        land = Land.objects.select_for_update().get(id=land_id)
    except Land.DoesNotExist:
        raise LandNotFoundError(f"Land with ID {land_id} not found")

    try:
        client = User.objects.get(id=client_id)
    except User.DoesNotExist:
        raise ClientNotFoundError(f"User with ID {client_id} not found")

    if client.role != UserRole.CLIENT:
        raise InvalidAssigneeError("Lands can only be assigned to clients")

    land.owner = client
    land.status = PropertyStatus.SOLD
    land.sold_at = timezone.now()
    land.save(update_fields=['owner', 'status', 'sold_at', 'updated_at'])

    logger.info("Assigned land %s to client %s", land.id, client.id)
    return land


def get_assigned_lands() -> List[dict]:
    """
    Return SOLD lands owned by clients, flattened for the dashboard table.

    Missing owner or plot values fall back to ``"Unknown"``.
    """
    lands = (
        Land.objects
        .filter(status=PropertyStatus.SOLD, owner__role=UserRole.CLIENT)
        .select_related('owner', 'plot')
        .annotate(assigned_at=Coalesce('sold_at', 'created_at'))
        .order_by('-assigned_at')
    )

    return [
        {
            'id': land.id,
            'land_number': land.number,
            'land_size': land.size,
            'assigned_at': land.assigned_at,
            'client_name': (land.owner.name if land.owner else '') or 'Unknown',
            'client_email': (land.owner.email if land.owner else '') or 'Unknown',
            'plot_title': (land.plot.title if land.plot else '') or 'Unknown',
        }
        for land in lands
    ]


def get_owned_lands(*, user: User) -> QuerySet:
    """Return the SOLD lands owned by ``user``, newest first."""
    return (
        Land.objects
        .filter(owner=user, status=PropertyStatus.SOLD)
        .select_related('plot')
        .order_by('-created_at')
    )
