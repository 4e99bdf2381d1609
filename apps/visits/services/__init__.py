"""Services for visits business logic."""

from .exceptions import (
    VisitsServiceError,
    VisitRequestNotFoundError,
    PlotNotFoundError,
    VisitDateInPastError,
    DuplicateVisitRequestError,
    InvalidVisitStatusError,
    ManagerNotFoundError,
    InvalidManagerError,
    NotAssignedManagerError,
    FeedbackNotAllowedError,
    DuplicateFeedbackError,
)
from .visit_requests import (
    create_visit_request,
    build_pass_payload,
    get_visit_pass,
    approve_visit_request,
    reject_visit_request,
    assign_manager,
    complete_visit_request,
    get_visits_for_user,
)
from .feedback import submit_feedback

__all__ = [
    # Exceptions
    'VisitsServiceError',
    'VisitRequestNotFoundError',
    'PlotNotFoundError',
    'VisitDateInPastError',
    'DuplicateVisitRequestError',
    'InvalidVisitStatusError',
    'ManagerNotFoundError',
    'InvalidManagerError',
    'NotAssignedManagerError',
    'FeedbackNotAllowedError',
    'DuplicateFeedbackError',
    # Services
    'create_visit_request',
    'build_pass_payload',
    'get_visit_pass',
    'approve_visit_request',
    'reject_visit_request',
    'assign_manager',
    'complete_visit_request',
    'get_visits_for_user',
    'submit_feedback',
]
