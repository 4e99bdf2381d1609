"""Visit feedback service."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.accounts.models import User
from apps.visits.models import VisitRequest, VisitStatus, Feedback

from .exceptions import (
    VisitRequestNotFoundError,
    FeedbackNotAllowedError,
    DuplicateFeedbackError,
)

logger = logging.getLogger(__name__)

FEEDBACK_STATUSES = (VisitStatus.APPROVED, VisitStatus.COMPLETED)


@transaction.atomic
def submit_feedback(
    *,
    visit_id: UUID,
    user: User,
    rating: int,
    experience: str,
    suggestions: str,
    purchase_interest: Optional[bool] = None
) -> Feedback:
    """
    Record feedback for a visit and mark the visit COMPLETED.

    Both writes happen in one transaction.

    Args:
        visit_id: UUID of the visit request
        user: User leaving the feedback, must be the visitor
        rating: 1..5
        experience: Free text about the visit
        suggestions: Free text suggestions
        purchase_interest: Whether the visitor is interested in buying

    Returns:
        Created Feedback instance

    Raises:
        VisitRequestNotFoundError: If visit doesn't exist
        FeedbackNotAllowedError: If visit is not approved/completed or is
            not the caller's
        DuplicateFeedbackError: If the caller already left feedback
    """
    try:
        visit = VisitRequest.objects.select_for_update().get(id=visit_id)
    except VisitRequest.DoesNotExist:
        raise VisitRequestNotFoundError("Invalid visit request ID. Visit request not found.")

    is_visitor = visit.user_id == user.id or visit.email.lower() == user.email.lower()
    if not is_visitor:
        raise FeedbackNotAllowedError("You can only leave feedback for your own visits")

    if visit.status not in FEEDBACK_STATUSES:
        raise FeedbackNotAllowedError("Feedback can only be left for approved visits")

    if Feedback.objects.filter(visit_request=visit, user=user).exists():
        raise DuplicateFeedbackError("Feedback has already been submitted for this visit.")

    try:
        feedback = Feedback.objects.create(
            visit_request=visit,
            user=user,
            rating=rating,
            experience=experience.strip(),
            suggestions=suggestions.strip(),
            purchase_interest=purchase_interest,
        )
    except IntegrityError:
        raise DuplicateFeedbackError("Feedback has already been submitted for this visit.")

    if visit.status != VisitStatus.COMPLETED:
        visit.status = VisitStatus.COMPLETED
        visit.save(update_fields=['status', 'updated_at'])

    logger.info("Feedback %s submitted for visit %s", feedback.id, visit.id)
    return feedback
