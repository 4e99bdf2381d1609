"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    ClerkManagedAccountError,
    InactiveAccountError,
    UserNotFoundError,
    UserAlreadyExistsError,
    InvalidRoleError,
    RoleEscalationError,
    WebhookConfigurationError,
    WebhookVerificationError,
    InvalidWebhookPayloadError,
)
from .user_authentication import authenticate_user
from .user_management import (
    get_user,
    get_user_by_clerk_id,
    create_user,
    update_user,
    delete_user,
)
from .identity_sync import verify_webhook, sync_user_from_event

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'ClerkManagedAccountError',
    'InactiveAccountError',
    'UserNotFoundError',
    'UserAlreadyExistsError',
    'InvalidRoleError',
    'RoleEscalationError',
    'WebhookConfigurationError',
    'WebhookVerificationError',
    'InvalidWebhookPayloadError',
    # Services
    'authenticate_user',
    'get_user',
    'get_user_by_clerk_id',
    'create_user',
    'update_user',
    'delete_user',
    'verify_webhook',
    'sync_user_from_event',
]
