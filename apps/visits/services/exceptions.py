"""Domain-specific exceptions for visits services."""


class VisitsServiceError(Exception):
    """Base exception for visits services."""
    pass


class VisitRequestNotFoundError(VisitsServiceError):
    """Raised when visit request does not exist."""
    pass


class PlotNotFoundError(VisitsServiceError):
    """Raised when the requested plot does not exist."""
    pass


class VisitDateInPastError(VisitsServiceError):
    """Raised when a visit is requested for a date before today."""
    pass


class DuplicateVisitRequestError(VisitsServiceError):
    """Raised when a pending request for the same plot already exists."""
    pass


class InvalidVisitStatusError(VisitsServiceError):
    """Raised when a transition is not allowed from the current status."""
    pass


class ManagerNotFoundError(VisitsServiceError):
    """Raised when the manager to assign does not exist."""
    pass


class InvalidManagerError(VisitsServiceError):
    """Raised when the user to assign is not a manager."""
    pass


class NotAssignedManagerError(VisitsServiceError):
    """Raised when a manager acts on a visit assigned to someone else."""
    pass


class FeedbackNotAllowedError(VisitsServiceError):
    """Raised when the caller cannot leave feedback for the visit."""
    pass


class DuplicateFeedbackError(VisitsServiceError):
    """Raised when feedback for the visit was already submitted."""
    pass
