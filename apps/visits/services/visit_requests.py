"""
Visit request lifecycle.

    PENDING -> APPROVED -> COMPLETED
    PENDING -> REJECTED

Approval issues a QR pass with the visitor's details. The pass expires
``VISIT_PASS_TTL_HOURS`` after approval.
"""

import logging
import datetime
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.db.models import Q, QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.inventory.models import Plot
from apps.inventory.services import QRCodeGenerator
from apps.visits.models import VisitRequest, VisitStatus

from .exceptions import (
    VisitRequestNotFoundError,
    PlotNotFoundError,
    VisitDateInPastError,
    DuplicateVisitRequestError,
    InvalidVisitStatusError,
    ManagerNotFoundError,
    InvalidManagerError,
    NotAssignedManagerError,
)

logger = logging.getLogger(__name__)


def _lock_visit(visit_id: UUID) -> VisitRequest:
    try:
        return (
            VisitRequest.objects
            .select_for_update()
            .select_related('plot__project')
            .get(id=visit_id)
        )
    except VisitRequest.DoesNotExist:
        raise VisitRequestNotFoundError(f"Visit request with ID {visit_id} not found")


@transaction.atomic
def create_visit_request(
    *,
    plot_id: UUID,
    name: str,
    email: str,
    phone: str,
    date: datetime.date,
    time: str,
    user: Optional[User] = None
) -> VisitRequest:
    """
    Create a PENDING visit request.

    Args:
        plot_id: UUID of the plot to visit
        name: Visitor name
        email: Visitor email
        phone: Visitor phone
        date: Requested visit date
        time: Requested time slot
        user: Signed-in requester, None for anonymous visitors

    Returns:
        Created VisitRequest instance

    Raises:
        VisitDateInPastError: If date is before today
        PlotNotFoundError: If plot doesn't exist
        DuplicateVisitRequestError: If a pending request for the plot
            exists for the same user or email
    """
    if date < timezone.localdate():
        raise VisitDateInPastError("Visit date cannot be in the past")

    try:
        plot = Plot.objects.get(id=plot_id)
    except Plot.DoesNotExist:
        raise PlotNotFoundError(f"Plot with ID {plot_id} not found")

    same_requester = Q(email__iexact=email)
    if user is not None:
        same_requester |= Q(user=user)

    duplicate = VisitRequest.objects.filter(
        same_requester,
        plot=plot,
        status=VisitStatus.PENDING
    )
    if duplicate.exists():
        raise DuplicateVisitRequestError(
            "You already have a pending visit request for this plot"
        )

    visit = VisitRequest.objects.create(
        plot=plot,
        user=user,
        name=name,
        email=email,
        phone=phone,
        date=date,
        time=time,
    )
    logger.info("Visit request %s created for plot %s", visit.id, plot.id)
    return visit


def build_pass_payload(visit: VisitRequest) -> dict:
    """Details embedded in the QR pass of a visit."""
    return {
        'id': str(visit.id),
        'name': visit.name,
        'email': visit.email,
        'phone': visit.phone,
        'date': visit.date.isoformat(),
        'time': visit.time,
        'plotId': str(visit.plot_id),
        'plotTitle': visit.plot.title,
        'projectName': visit.plot.project.name,
    }


def get_visit_pass(visit: VisitRequest) -> Optional[str]:
    """
    Return the QR pass of an approved visit.

    Approved requests stored without a pass get one generated on the fly.
    Other statuses have no pass.
    """
    if visit.status != VisitStatus.APPROVED:
        return None
    if visit.qr_code:
        return visit.qr_code
    return QRCodeGenerator.data_url_for_payload(build_pass_payload(visit))


@transaction.atomic
def approve_visit_request(*, visit_id: UUID) -> VisitRequest:
    """
    Approve a pending visit and issue its QR pass.

    Raises:
        VisitRequestNotFoundError: If visit doesn't exist
        InvalidVisitStatusError: If visit is not PENDING
    """
    visit = _lock_visit(visit_id)

    if visit.status != VisitStatus.PENDING:
        raise InvalidVisitStatusError(
            f"Only PENDING requests can be approved (current: {visit.status})"
        )

    now = timezone.now()
    visit.status = VisitStatus.APPROVED
    visit.approved_at = now
    visit.expires_at = now + datetime.timedelta(hours=settings.VISIT_PASS_TTL_HOURS)
    visit.qr_code = QRCodeGenerator.data_url_for_payload(build_pass_payload(visit))
    visit.save(update_fields=['status', 'approved_at', 'expires_at', 'qr_code', 'updated_at'])

    logger.info("Visit request %s approved, pass expires at %s", visit.id, visit.expires_at)
    return visit


@transaction.atomic
def reject_visit_request(*, visit_id: UUID) -> VisitRequest:
    """
    Reject a pending visit.

    Raises:
        VisitRequestNotFoundError: If visit doesn't exist
        InvalidVisitStatusError: If visit is not PENDING
    """
    visit = _lock_visit(visit_id)

    if visit.status != VisitStatus.PENDING:
        raise InvalidVisitStatusError(
            f"Only PENDING requests can be rejected (current: {visit.status})"
        )

    visit.status = VisitStatus.REJECTED
    visit.save(update_fields=['status', 'updated_at'])

    logger.info("Visit request %s rejected", visit.id)
    return visit


@transaction.atomic
def assign_manager(*, visit_id: UUID, manager_id: UUID) -> VisitRequest:
    """
    Assign a manager to accompany the visit.

    Raises:
        VisitRequestNotFoundError: If visit doesn't exist
        ManagerNotFoundError: If user doesn't exist
        InvalidManagerError: If user is not a MANAGER
    """
    visit = _lock_visit(visit_id)

    try:
        manager = User.objects.get(id=manager_id)
    except User.DoesNotExist:
        raise ManagerNotFoundError(f"User with ID {manager_id} not found")

    if not manager.is_manager:
        raise InvalidManagerError("Assigned user must have the MANAGER role")

    visit.assigned_manager = manager
    visit.save(update_fields=['assigned_manager', 'updated_at'])

    logger.info("Manager %s assigned to visit request %s", manager.id, visit.id)
    return visit


@transaction.atomic
def complete_visit_request(*, visit_id: UUID, user: User) -> VisitRequest:
    """
    Mark an approved visit as completed.

    Admins may complete any visit; managers only the ones assigned to them.

    Raises:
        VisitRequestNotFoundError: If visit doesn't exist
        NotAssignedManagerError: If a manager is not assigned to the visit
        InvalidVisitStatusError: If visit is not APPROVED
    """
    visit = _lock_visit(visit_id)

    if not user.is_admin_role and visit.assigned_manager_id != user.id:
        raise NotAssignedManagerError("Only the assigned manager can complete this visit")

    if visit.status != VisitStatus.APPROVED:
        raise InvalidVisitStatusError("Only APPROVED requests can be completed")

    visit.status = VisitStatus.COMPLETED
    visit.save(update_fields=['status', 'updated_at'])

    logger.info("Visit request %s completed by %s", visit.id, user.id)
    return visit


def get_visits_for_user(*, user: User) -> QuerySet:
    """Visits requested by the user or assigned to them as manager."""
    return (
        VisitRequest.objects
        .filter(Q(user=user) | Q(assigned_manager=user))
        .select_related('user', 'plot__project', 'assigned_manager')
        .order_by('-created_at')
    )
