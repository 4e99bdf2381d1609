"""Leave request service."""

import datetime
import logging
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.staff.models import LeaveRequest, LeaveStatus

from .exceptions import (
    LeaveRequestNotFoundError,
    InvalidLeavePeriodError,
    InvalidLeaveStatusError,
)

logger = logging.getLogger(__name__)


def create_leave_request(
    *,
    manager: User,
    start_date: datetime.date,
    end_date: datetime.date,
    reason: str
) -> LeaveRequest:
    """
    Create a PENDING leave request.

    Raises:
        InvalidLeavePeriodError: If end_date is before start_date
    """
    if end_date < start_date:
        raise InvalidLeavePeriodError("End date cannot be before start date")

    leave = LeaveRequest.objects.create(
        manager=manager,
        start_date=start_date,
        end_date=end_date,
        reason=reason,
    )
    logger.info("Leave request %s created by %s", leave.id, manager.id)
    return leave


@transaction.atomic
def update_leave_status(*, leave_id: UUID, status: str) -> LeaveRequest:
    """
    Approve or reject a pending leave request.

    Raises:
        LeaveRequestNotFoundError: If request doesn't exist
        InvalidLeaveStatusError: If request is not PENDING
    """
    try:
        leave = LeaveRequest.objects.select_for_update().get(id=leave_id)
    except LeaveRequest.DoesNotExist:
        raise LeaveRequestNotFoundError(f"Leave request with ID {leave_id} not found")

    if leave.status != LeaveStatus.PENDING:
        raise InvalidLeaveStatusError(
            f"Only PENDING requests can be decided (current: {leave.status})"
        )

    leave.status = status
    leave.save(update_fields=['status', 'updated_at'])

    logger.info("Leave request %s set to %s", leave.id, status)
    return leave
