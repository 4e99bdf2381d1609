"""Services for staff business logic."""

from .exceptions import (
    StaffServiceError,
    OfficeNotFoundError,
    ManagerNotFoundError,
    InvalidManagerError,
    LeaveRequestNotFoundError,
    InvalidLeavePeriodError,
    InvalidLeaveStatusError,
)
from .office_management import assign_manager_to_office
from .leave_management import create_leave_request, update_leave_status

__all__ = [
    # Exceptions
    'StaffServiceError',
    'OfficeNotFoundError',
    'ManagerNotFoundError',
    'InvalidManagerError',
    'LeaveRequestNotFoundError',
    'InvalidLeavePeriodError',
    'InvalidLeaveStatusError',
    # Services
    'assign_manager_to_office',
    'create_leave_request',
    'update_leave_status',
]
