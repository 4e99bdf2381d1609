"""
Dashboard password login.

Most accounts are mirrored from Clerk by the webhook and sign in there.
Only accounts given a password (seeded staff, accounts created with one
in the Django admin) can get a JWT pair here.
"""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, ClerkManagedAccountError, InactiveAccountError

User = get_user_model()
logger = logging.getLogger(__name__)

CLERK_SIGN_IN_MESSAGE = "This account signs in through Clerk and has no dashboard password"


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Check an email and password for a dashboard login.

    The email match is case-insensitive, like Clerk's. The row is locked
    while ``last_login`` is stamped.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong
        ClerkManagedAccountError: If the account came from Clerk and has
            no usable password
        InactiveAccountError: If the account is deactivated
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email__iexact=email)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError("Invalid email or password")

    if user.clerk_id and not user.has_usable_password():
        logger.info("Password login refused for Clerk account %s", user.id)
        raise ClerkManagedAccountError(CLERK_SIGN_IN_MESSAGE)

    if not user.check_password(password):
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    logger.info("User %s (%s) signed in with a password", user.id, user.role)
    return user
