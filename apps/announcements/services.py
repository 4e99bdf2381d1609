"""
Notification services.

A notification goes either to a single user or to every user holding a
role. Broadcasts are written in one transaction, so a role either gets
the message for all of its users or for none.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from .models import Notification
from .exceptions import RecipientNotFoundError, NotificationNotFoundError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def send_notification(*, message, title='', user_id=None, target_role=''):
    """
    Create notifications for a user or for every user of a role.

    ``user_id`` wins when both are given.

    Args:
        message (str): Notification body.
        title (str): Optional heading.
        user_id (UUID): Single recipient.
        target_role (str): UserRole value to broadcast to.

    Returns:
        list[Notification]: Created notifications, possibly empty when the
        role has no users.

    Raises:
        RecipientNotFoundError: If ``user_id`` is unknown.
    """
    if user_id:
        try:
            user = User.objects.get(id=user_id)
        except User.DoesNotExist:
            raise RecipientNotFoundError()
        notification = Notification.objects.create(user=user, title=title, message=message)
        logger.info("Notification %s sent to user %s", notification.id, user.id)
        return [notification]

    recipients = User.objects.filter(role=target_role, is_active=True)
    notifications = [
        Notification.objects.create(
            user=user,
            title=title,
            message=message,
            target_role=target_role,
        )
        for user in recipients
    ]
    logger.info("Notification broadcast to %d %s users", len(notifications), target_role)
    return notifications


def mark_notification_read(*, notification_id, user):
    """
    Mark one of the user's notifications as read.

    Raises:
        NotificationNotFoundError: If the notification is not the user's.
    """
    updated = Notification.objects.filter(id=notification_id, user=user).update(is_read=True)
    if not updated:
        raise NotificationNotFoundError()
    return Notification.objects.get(id=notification_id)
