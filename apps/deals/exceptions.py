"""
Domain exceptions for deals app.

Raised by the buy/sell request services. DRF renders them as
``{"detail": ...}`` with the matching status code.
"""
from rest_framework.exceptions import APIException


class LandNotFoundError(APIException):
    """Land not found."""
    status_code = 404
    default_detail = 'Land not found.'
    default_code = 'land_not_found'


class LandNotAvailableError(APIException):
    """Land cannot be bought in its current status."""
    status_code = 400
    default_detail = 'Land is not available for purchase.'
    default_code = 'land_not_available'


class BuyRequestNotFoundError(APIException):
    """Buy request not found."""
    status_code = 404
    default_detail = 'Buy request not found.'
    default_code = 'buy_request_not_found'


class SellRequestNotFoundError(APIException):
    """Sell request not found, or not deletable by the caller."""
    status_code = 404
    default_detail = 'Sell request not found or cannot be deleted.'
    default_code = 'sell_request_not_found'


class NotLandOwnerError(APIException):
    """Only the owner of a land can sell it."""
    status_code = 403
    default_detail = 'You do not own this land.'
    default_code = 'not_land_owner'


class DuplicateSellRequestError(APIException):
    """A pending sell request for the land already exists."""
    status_code = 409
    default_detail = 'You already have a pending sell request for this property.'
    default_code = 'duplicate_sell_request'


class InvalidStateTransitionError(APIException):
    """Invalid request status transition."""
    status_code = 400
    default_detail = 'Invalid status transition.'
    default_code = 'invalid_state_transition'
