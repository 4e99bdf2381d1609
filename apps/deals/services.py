"""
Deal Services Module
====================

Business logic for buy requests (a client asks to buy an available land)
and sell requests (an owner asks the agency to resell a land).

Functions:
    create_buy_request: Request to buy an AVAILABLE land.
    update_buy_request_status: Approve or reject a pending buy request.
    create_sell_request: Put an owned land up for resale.
    update_sell_request_status: Admin decision on a sell request.
    delete_sell_request: Owner withdraws a pending sell request.

Example:
    Reselling a land::

        from decimal import Decimal
        from apps.deals.services import create_sell_request

        sell_request = create_sell_request(
            user=request.user,
            land_id=land.id,
            asking_price=Decimal('150000.00'),
            terms_accepted=True,
        )
        sell_request.potential_profit   # Decimal('50000.00') for a 100000 land
        sell_request.profit_percentage  # Decimal('50.00')
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from django.db import transaction
from django.utils import timezone

from apps.inventory.models import Land, PropertyStatus
from .models import (
    BuyRequest,
    BuyRequestStatus,
    SellRequest,
    SellRequestStatus,
    Urgency,
)
from .exceptions import (
    LandNotFoundError,
    LandNotAvailableError,
    BuyRequestNotFoundError,
    SellRequestNotFoundError,
    NotLandOwnerError,
    DuplicateSellRequestError,
    InvalidStateTransitionError,
)

logger = logging.getLogger(__name__)

DEFAULT_SELL_REASON = 'No reason provided'

# Timestamp stamped on a sell request when it enters the status
SELL_STATUS_TIMESTAMPS = {
    SellRequestStatus.APPROVED: 'approved_at',
    SellRequestStatus.REJECTED: 'rejected_at',
    SellRequestStatus.COMPLETED: 'completed_at',
}


@transaction.atomic
def create_buy_request(*, user, land_id, message):
    """
    Create a PENDING buy request for an available land.

    Raises:
        LandNotFoundError: If land doesn't exist.
        LandNotAvailableError: If land is not AVAILABLE.
    """
    try:
        land = Land.objects.select_related('plot').get(id=land_id)
    except Land.DoesNotExist:
        raise LandNotFoundError()

    if land.status != PropertyStatus.AVAILABLE:
        raise LandNotAvailableError()

    buy_request = BuyRequest.objects.create(land=land, user=user, message=message)
    logger.info("Buy request %s created for land %s", buy_request.id, land.id)
    return buy_request


@transaction.atomic
def update_buy_request_status(*, buy_request_id, status):
    """
    Approve or reject a pending buy request.

    Approval puts the land on ADVANCE so nobody else can request it.

    Raises:
        BuyRequestNotFoundError: If request doesn't exist.
        InvalidStateTransitionError: If request is not PENDING or the
            target status is not APPROVED/REJECTED.
        LandNotAvailableError: If the land was taken meanwhile.
    """
    try:
        buy_request = (
            BuyRequest.objects
            .select_for_update()
            .select_related('land')
            .get(id=buy_request_id)
        )
    except BuyRequest.DoesNotExist:
        raise BuyRequestNotFoundError()

    if status not in (BuyRequestStatus.APPROVED, BuyRequestStatus.REJECTED):
        raise InvalidStateTransitionError('Status must be APPROVED or REJECTED.')

    if buy_request.status != BuyRequestStatus.PENDING:
        raise InvalidStateTransitionError(
            f'Only PENDING requests can be decided (current: {buy_request.status}).'
        )

    if status == BuyRequestStatus.APPROVED:
        land = Land.objects.select_for_update().get(id=buy_request.land_id)
        if land.status != PropertyStatus.AVAILABLE:
            raise LandNotAvailableError()
        land.status = PropertyStatus.ADVANCE
        land.save(update_fields=['status', 'updated_at'])
        buy_request.land = land

    buy_request.status = status
    buy_request.save(update_fields=['status', 'updated_at'])

    logger.info("Buy request %s set to %s", buy_request.id, status)
    return buy_request


def calculate_profit(asking_price, purchase_price):
    """
    Compare the asking price with what the owner paid.

    Args:
        asking_price (Decimal): Price the owner wants.
        purchase_price (Decimal): Price of the land.

    Returns:
        tuple: ``(potential_profit, profit_percentage)``, both rounded to
        two decimal places. The percentage is 0 when the land has no price.
    """
    profit = (asking_price - purchase_price).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    if not purchase_price:
        return profit, Decimal('0.00')
    percentage = (profit / purchase_price * 100).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    return profit, percentage


@transaction.atomic
def create_sell_request(
    *,
    user,
    land_id,
    asking_price,
    terms_accepted,
    reason='',
    urgency=Urgency.NORMAL,
    agent_assistance=False,
    documents=None
):
    """
    Put an owned land up for resale.

    Raises:
        InvalidStateTransitionError: If terms are not accepted.
        LandNotFoundError: If land doesn't exist.
        NotLandOwnerError: If the caller does not own the land.
        DuplicateSellRequestError: If the caller has a pending request
            for the land.
    """
    if not terms_accepted:
        raise InvalidStateTransitionError('Terms and conditions must be accepted.')

    try:
        land = Land.objects.select_for_update().select_related('plot').get(id=land_id)
    except Land.DoesNotExist:
        raise LandNotFoundError()

    if land.owner_id != user.id:
        raise NotLandOwnerError()

    pending = SellRequest.objects.filter(
        land=land,
        user=user,
        status=SellRequestStatus.PENDING
    )
    if pending.exists():
        raise DuplicateSellRequestError()

    potential_profit, profit_percentage = calculate_profit(asking_price, land.price)

    sell_request = SellRequest.objects.create(
        plot=land.plot,
        land=land,
        user=user,
        asking_price=asking_price,
        reason=(reason or '').strip() or DEFAULT_SELL_REASON,
        urgency=urgency,
        agent_assistance=agent_assistance,
        documents=documents or [],
        terms_accepted=terms_accepted,
        potential_profit=potential_profit,
        profit_percentage=profit_percentage,
    )
    logger.info("Sell request %s created for land %s", sell_request.id, land.id)
    return sell_request


@transaction.atomic
def update_sell_request_status(*, sell_request_id, status, admin_notes=''):
    """
    Record the admin decision on a sell request.

    Entering APPROVED, REJECTED or COMPLETED stamps the matching
    ``*_at`` field.

    Raises:
        SellRequestNotFoundError: If request doesn't exist.
    """
    try:
        sell_request = SellRequest.objects.select_for_update().get(id=sell_request_id)
    except SellRequest.DoesNotExist:
        raise SellRequestNotFoundError('Sell request not found.')

    sell_request.status = status
    sell_request.admin_notes = admin_notes or ''
    update_fields = ['status', 'admin_notes', 'updated_at']

    timestamp_field = SELL_STATUS_TIMESTAMPS.get(status)
    if timestamp_field:
        setattr(sell_request, timestamp_field, timezone.now())
        update_fields.append(timestamp_field)

    sell_request.save(update_fields=update_fields)
    logger.info("Sell request %s set to %s", sell_request.id, status)
    return sell_request


@transaction.atomic
def delete_sell_request(*, sell_request_id, user):
    """
    Withdraw a pending sell request owned by ``user``.

    Raises:
        SellRequestNotFoundError: If the request doesn't exist, belongs to
            someone else, or is no longer PENDING.
    """
    deleted, _ = SellRequest.objects.filter(
        id=sell_request_id,
        user=user,
        status=SellRequestStatus.PENDING
    ).delete()
    if not deleted:
        raise SellRequestNotFoundError()
    logger.info("Sell request %s withdrawn by %s", sell_request_id, user.id)
