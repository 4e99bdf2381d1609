"""
Domain exceptions for announcements app.
"""
from rest_framework.exceptions import APIException


class RecipientNotFoundError(APIException):
    """Notification recipient not found."""
    status_code = 404
    default_detail = 'Recipient not found.'
    default_code = 'recipient_not_found'


class NotificationNotFoundError(APIException):
    """Notification not found for the current user."""
    status_code = 404
    default_detail = 'Notification not found.'
    default_code = 'notification_not_found'
