"""Domain-specific exceptions for staff services."""


class StaffServiceError(Exception):
    """Base exception for staff services."""
    pass


class OfficeNotFoundError(StaffServiceError):
    """Raised when office does not exist."""
    pass


class ManagerNotFoundError(StaffServiceError):
    """Raised when the manager does not exist."""
    pass


class InvalidManagerError(StaffServiceError):
    """Raised when the user is not a manager."""
    pass


class LeaveRequestNotFoundError(StaffServiceError):
    """Raised when leave request does not exist."""
    pass


class InvalidLeavePeriodError(StaffServiceError):
    """Raised when the leave ends before it starts."""
    pass


class InvalidLeaveStatusError(StaffServiceError):
    """Raised when a decided leave request is decided again."""
    pass
