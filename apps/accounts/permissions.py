"""
Role-based permission classes shared by all apps.

Roles come from ``User.role`` (see ``UserRole``). Every class here also
requires an authenticated user, so they can be used on their own.

Usage:
    from apps.accounts.permissions import IsAdminRole

    class ProjectViewSet(viewsets.ModelViewSet):
        def get_permissions(self):
            if self.action in ['create', 'update', 'partial_update', 'destroy']:
                return [IsAdminRole()]
            return [AllowAny()]
"""
from rest_framework.permissions import BasePermission

from .models import UserRole


def _authenticated(request):
    return bool(request.user and request.user.is_authenticated)


class IsSuperAdmin(BasePermission):
    """Permission: user must have the SUPERADMIN role."""

    message = 'Only super admins can perform this action.'

    def has_permission(self, request, view):
        return _authenticated(request) and request.user.role == UserRole.SUPERADMIN


class IsAdminRole(BasePermission):
    """Permission: user must be ADMIN or SUPERADMIN."""

    message = 'Only admins can perform this action.'

    def has_permission(self, request, view):
        return _authenticated(request) and request.user.is_admin_role


class IsManagerOrAdmin(BasePermission):
    """Permission: user must be MANAGER, ADMIN or SUPERADMIN."""

    message = 'Only managers and admins can perform this action.'

    def has_permission(self, request, view):
        return _authenticated(request) and (
            request.user.is_manager or request.user.is_admin_role
        )


class IsManager(BasePermission):
    """Permission: user must have the MANAGER role."""

    message = 'Only managers can perform this action.'

    def has_permission(self, request, view):
        return _authenticated(request) and request.user.is_manager


class IsClient(BasePermission):
    """Permission: user must have the CLIENT role."""

    message = 'Only clients can access owned lands.'

    def has_permission(self, request, view):
        return _authenticated(request) and request.user.is_client


class IsSelfOrAdmin(BasePermission):
    """
    Permission: object is the requesting user, or the user is an admin.

    ``obj`` is a User instance.
    """

    def has_object_permission(self, request, view, obj):
        return obj == request.user or request.user.is_admin_role
