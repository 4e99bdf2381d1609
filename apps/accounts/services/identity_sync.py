"""
Identity-provider sync service.

Clerk owns sign-up and sign-in. It notifies us about account changes
through Svix-signed webhooks, and this module mirrors those accounts into
the local users table.
"""

import logging
from typing import Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from svix.webhooks import Webhook, WebhookVerificationError as SvixVerificationError

from apps.accounts.models import UserRole

from .exceptions import (
    WebhookConfigurationError,
    WebhookVerificationError,
    InvalidWebhookPayloadError,
    UserAlreadyExistsError,
)

User = get_user_model()
logger = logging.getLogger(__name__)

SVIX_HEADERS = ('svix-id', 'svix-timestamp', 'svix-signature')
USER_EVENTS = ('user.created', 'user.updated')


def verify_webhook(*, payload: bytes, headers: dict) -> dict:
    """
    Verify a Svix signature and return the decoded event.

    Args:
        payload: Raw request body
        headers: Mapping holding the svix-id, svix-timestamp and
            svix-signature headers

    Returns:
        Decoded event dict

    Raises:
        WebhookConfigurationError: If CLERK_WEBHOOK_SECRET is not set
        WebhookVerificationError: If headers are missing or the signature
            does not match
    """
    secret = getattr(settings, 'CLERK_WEBHOOK_SECRET', '')
    if not secret:
        raise WebhookConfigurationError("Webhook secret is not configured")

    svix_headers = {name: headers.get(name) for name in SVIX_HEADERS}
    if not all(svix_headers.values()):
        raise WebhookVerificationError("Missing svix headers")

    try:
        return Webhook(secret).verify(payload, svix_headers)
    except SvixVerificationError as e:
        logger.warning("Rejected webhook %s: %s", svix_headers['svix-id'], e)
        raise WebhookVerificationError("Invalid webhook signature")


def _primary_email(data: dict) -> Optional[str]:
    addresses = data.get('email_addresses') or []
    if not addresses:
        return None
    return addresses[0].get('email_address')


def _primary_phone(data: dict) -> str:
    numbers = data.get('phone_numbers') or []
    if not numbers:
        return ''
    return numbers[0].get('phone_number') or ''


def _role_from_metadata(data: dict) -> str:
    role = (data.get('public_metadata') or {}).get('role')
    if isinstance(role, str) and role.upper() in UserRole.values:
        return role.upper()
    return UserRole.GUEST


@transaction.atomic
def sync_user_from_event(*, event: dict) -> Optional[User]:
    """
    Upsert the local user described by a user.created/user.updated event.

    Other event types are ignored and return None.

    Raises:
        InvalidWebhookPayloadError: If the event has no user id or email
        UserAlreadyExistsError: If the email belongs to a different account
    """
    event_type = event.get('type')
    if event_type not in USER_EVENTS:
        logger.info("Ignoring webhook event %s", event_type)
        return None

    data = event.get('data') or {}
    clerk_id = data.get('id')
    email = _primary_email(data)
    if not clerk_id or not email:
        raise InvalidWebhookPayloadError("User event is missing id or email")

    email = User.objects.normalize_email(email)
    first_name = data.get('first_name') or ''
    last_name = data.get('last_name') or ''
    name = f"{first_name} {last_name}".strip() or 'Unknown'
    role = _role_from_metadata(data)
    phone = _primary_phone(data)

    user = User.objects.select_for_update().filter(clerk_id=clerk_id).first()
    if user is None:
        # Link a record created by an admin before the first sign-in
        user = (
            User.objects
            .select_for_update()
            .filter(email__iexact=email, clerk_id__isnull=True)
            .first()
        )

    if User.objects.filter(email__iexact=email).exclude(
        id=user.id if user else None
    ).exists():
        raise UserAlreadyExistsError(f"Email {email} belongs to another account")

    if user is None:
        user = User.objects.create_user(
            email=email,
            name=name,
            role=role,
            clerk_id=clerk_id,
            phone=phone,
        )
        logger.info("Created user %s from %s", user.id, event_type)
        return user

    user.clerk_id = clerk_id
    user.email = email
    user.name = name
    user.role = role
    if phone:
        user.phone = phone
    user.save()
    logger.info("Updated user %s from %s", user.id, event_type)
    return user
