"""Services for inventory business logic."""

from .exceptions import (
    InventoryServiceError,
    ProjectNotFoundError,
    ProjectHasPlotsError,
    PlotNotFoundError,
    LandNotFoundError,
    ClientNotFoundError,
    InvalidAssigneeError,
)
from .qr_codes import QRCodeGenerator
from .project_management import delete_project
from .plot_management import create_plot, update_plot
from .land_management import (
    create_land,
    assign_land,
    get_assigned_lands,
    get_owned_lands,
)

__all__ = [
    # Exceptions
    'InventoryServiceError',
    'ProjectNotFoundError',
    'ProjectHasPlotsError',
    'PlotNotFoundError',
    'LandNotFoundError',
    'ClientNotFoundError',
    'InvalidAssigneeError',
    # Services
    'QRCodeGenerator',
    'delete_project',
    'create_plot',
    'update_plot',
    'create_land',
    'assign_land',
    'get_assigned_lands',
    'get_owned_lands',
]
