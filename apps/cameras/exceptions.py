"""
Domain exceptions for cameras app.

HTTP-facing errors raised by the camera services. DRF renders them as
``{"detail": ...}`` with the matching status code.
"""
from rest_framework.exceptions import APIException


class PlotNotFoundError(APIException):
    """Plot not found."""
    status_code = 404
    default_detail = 'Plot not found.'
    default_code = 'plot_not_found'


class LandNotFoundError(APIException):
    """Land not found."""
    status_code = 404
    default_detail = 'Land not found.'
    default_code = 'land_not_found'


class OwnerRequiredError(APIException):
    """Cameras can only be installed on property that has an owner."""
    status_code = 400
    default_detail = 'Property must be assigned to an owner first.'
    default_code = 'owner_required'
