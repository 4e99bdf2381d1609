"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class ClerkManagedAccountError(InvalidCredentialsError):
    """Raised when an account mirrored from Clerk has no password to check."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class UserAlreadyExistsError(AccountsServiceError):
    """Raised when the email or identity-provider id is already taken."""
    pass


class InvalidRoleError(AccountsServiceError):
    """Raised when a role is unknown or not allowed for the operation."""
    pass


class RoleEscalationError(AccountsServiceError):
    """Raised when a non super-admin tries to grant an admin role."""
    pass


class WebhookConfigurationError(AccountsServiceError):
    """Raised when the identity-provider webhook secret is missing."""
    pass


class WebhookVerificationError(AccountsServiceError):
    """Raised when a webhook signature or its headers are invalid."""
    pass


class InvalidWebhookPayloadError(AccountsServiceError):
    """Raised when a user event lacks an id or an email address."""
    pass
