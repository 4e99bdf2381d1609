"""Domain-specific exceptions for inventory services."""


class InventoryServiceError(Exception):
    """Base exception for inventory services."""
    pass


class ProjectNotFoundError(InventoryServiceError):
    """Raised when project does not exist."""
    pass


class ProjectHasPlotsError(InventoryServiceError):
    """Raised when deleting a project that still has plots."""
    pass


class PlotNotFoundError(InventoryServiceError):
    """Raised when plot does not exist."""
    pass


class LandNotFoundError(InventoryServiceError):
    """Raised when land does not exist."""
    pass


class ClientNotFoundError(InventoryServiceError):
    """Raised when the user a land is assigned to does not exist."""
    pass


class InvalidAssigneeError(InventoryServiceError):
    """Raised when a land is assigned to a user who is not a client."""
    pass
