"""
Office management service.

A manager works from one office at a time.
"""

import logging
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.staff.models import Office

from .exceptions import OfficeNotFoundError, ManagerNotFoundError, InvalidManagerError

logger = logging.getLogger(__name__)


@transaction.atomic
def assign_manager_to_office(*, office_id: UUID, manager_id: UUID) -> Office:
    """
    Move a manager to an office.

    Any previous office assignment of the manager is removed.

    Args:
        office_id: UUID of the office
        manager_id: UUID of the manager

    Returns:
        Updated Office instance

    Raises:
        OfficeNotFoundError: If office doesn't exist
        ManagerNotFoundError: If user doesn't exist
        InvalidManagerError: If user is not a MANAGER
    """
    try:
        office = Office.objects.select_for_update().get(id=office_id)
    except Office.DoesNotExist:
        raise OfficeNotFoundError(f"Office with ID {office_id} not found")

    try:
        manager = User.objects.get(id=manager_id)
    except User.DoesNotExist:
        raise ManagerNotFoundError(f"User with ID {manager_id} not found")

    if not manager.is_manager:
        raise InvalidManagerError("Only managers can be assigned to an office")

    manager.offices.clear()
    office.managers.add(manager)

    logger.info("Manager %s assigned to office %s", manager.id, office.id)
    return office
