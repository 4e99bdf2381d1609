"""
User management service.

Creates, updates and deletes user records on behalf of dashboard admins.
Role changes are checked here so every entry point shares the same rules.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from apps.accounts.models import UserRole, ADMIN_ROLES

from .exceptions import (
    UserNotFoundError,
    UserAlreadyExistsError,
    InvalidRoleError,
    RoleEscalationError,
)

User = get_user_model()
logger = logging.getLogger(__name__)


def _check_role(role: str, *, acting_user: Optional[User], allowed=None) -> None:
    if role not in UserRole.values:
        raise InvalidRoleError(f"Invalid role: {role}")
    if allowed is not None and role not in allowed:
        raise InvalidRoleError(
            f"Role must be one of: {', '.join(allowed)}"
        )
    if role in ADMIN_ROLES and not (acting_user and acting_user.is_superadmin):
        raise RoleEscalationError("Only super admins can grant admin roles")


def get_user(*, user_id: UUID) -> User:
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")


def get_user_by_clerk_id(*, clerk_id: str) -> User:
    """Return the user mirrored from the given identity-provider id."""
    try:
        return User.objects.get(clerk_id=clerk_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with Clerk ID {clerk_id} not found")


@transaction.atomic
def create_user(
    *,
    name: str,
    email: str,
    role: str,
    clerk_id: str,
    phone: str = '',
    created_by: Optional[User] = None,
    allowed_roles=None,
) -> User:
    """
    Create a user record.

    Args:
        name: Display name
        email: Unique email address
        role: One of UserRole values
        clerk_id: Identity-provider user id
        phone: Optional phone number
        created_by: Acting user, used for the admin-role check
        allowed_roles: Restrict the role to this subset (admin endpoints)

    Returns:
        Created User instance

    Raises:
        InvalidRoleError: If role is unknown or not in allowed_roles
        RoleEscalationError: If a non super-admin grants an admin role
        UserAlreadyExistsError: If email or clerk_id is taken
    """
    _check_role(role, acting_user=created_by, allowed=allowed_roles)

    email = User.objects.normalize_email(email)
    if User.objects.filter(email__iexact=email).exists():
        raise UserAlreadyExistsError("User with this email already exists")
    if User.objects.filter(clerk_id=clerk_id).exists():
        raise UserAlreadyExistsError("User with this Clerk ID already exists")

    user = User.objects.create_user(
        email=email,
        name=name,
        role=role,
        clerk_id=clerk_id,
        phone=phone,
    )
    logger.info("Created user %s with role %s", user.id, role)
    return user


@transaction.atomic
def update_user(
    *,
    user_id: UUID,
    updated_by: Optional[User] = None,
    allowed_roles=None,
    **fields
) -> User:
    """
    Partially update name, email, role or phone of a user.

    Raises:
        UserNotFoundError: If user does not exist
        UserAlreadyExistsError: If the new email belongs to another user
        InvalidRoleError: If the new role is unknown
        RoleEscalationError: If the acting user may not assign the role
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    update_fields = []

    if 'email' in fields:
        email = User.objects.normalize_email(fields['email'])
        taken = User.objects.filter(email__iexact=email).exclude(id=user.id)
        if taken.exists():
            raise UserAlreadyExistsError("Email is already in use by another user")
        user.email = email
        update_fields.append('email')

    if 'role' in fields and fields['role'] != user.role:
        role = fields['role']
        if updated_by is not None and not updated_by.is_admin_role:
            raise RoleEscalationError("Only admins can change roles")
        _check_role(role, acting_user=updated_by, allowed=allowed_roles)
        # Demoting an admin is an admin-role change as well
        if user.is_admin_role and not (updated_by and updated_by.is_superadmin):
            raise RoleEscalationError("Only super admins can change admin roles")
        user.role = role
        update_fields.append('role')

    for field in ('name', 'phone'):
        if field in fields:
            setattr(user, field, fields[field])
            update_fields.append(field)

    if update_fields:
        update_fields.append('updated_at')
        user.save(update_fields=update_fields)

    return user


@transaction.atomic
def delete_user(*, user_id: UUID) -> None:
    """
    Delete a user record.

    Raises:
        UserNotFoundError: If user does not exist
    """
    deleted, _ = User.objects.filter(id=user_id).delete()
    if not deleted:
        raise UserNotFoundError(f"User with ID {user_id} not found")
    logger.info("Deleted user %s", user_id)
