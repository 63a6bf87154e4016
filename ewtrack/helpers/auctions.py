"""
Auction lifecycle for items: open, bid, close.

Closing only finalizes. The winner and the highest bid are whatever bid
placement accumulated on the item.
"""
import logging
import math
from datetime import datetime, timezone

from dateutil import parser as date_parser

from ..errors import ValidationError, NotFoundError, InvalidStateError, UnauthorizedError
from ..models.bid import Bid
from ..models.item import (
    Item,
    BIDDING_DRAFT,
    BIDDING_OPEN,
    BIDDING_CLOSED,
    STATUS_DRAFT,
    STATUS_REPORTED,
)

logger = logging.getLogger(__name__)


def utcnow():
    return datetime.utcnow()


def can_manage_item(user, item) -> bool:
    """Owner or admin."""
    if user is None or not getattr(user, "is_authenticated", False):
        return False
    return user.role == "admin" or user.email == item.created_by


def parse_end_date(value):
    """ISO 8601 string to a naive UTC datetime, None when empty."""
    if value in (None, ""):
        return None
    try:
        parsed = date_parser.isoparse(str(value))
    except (ValueError, OverflowError):
        raise ValidationError("Invalid biddingEndDate.")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _get_item(session, item_id):
    item = session.get(Item, item_id) if item_id else None
    if item is None:
        raise NotFoundError("Item not found.")
    return item


def open_auction(session, item_id, requester, bidding_end_date=None, starting_bid=None, now=None):
    item = _get_item(session, item_id)
    if not can_manage_item(requester, item):
        raise UnauthorizedError("Not allowed to manage this item.")
    if item.bidding_status != BIDDING_DRAFT:
        raise InvalidStateError(f"Auction cannot be opened from '{item.bidding_status}'.")

    now = now or utcnow()
    end_date = parse_end_date(bidding_end_date)
    if end_date is not None and end_date <= now:
        raise ValidationError("biddingEndDate must be in the future.")

    if starting_bid in (None, ""):
        starting = 0.0
    else:
        try:
            starting = float(starting_bid)
        except (TypeError, ValueError):
            raise ValidationError("Invalid startingBid.")
        if not math.isfinite(starting) or starting < 0:
            raise ValidationError("startingBid cannot be negative.")

    item.bidding_status = BIDDING_OPEN
    item.bidding_end_date = end_date
    item.current_highest_bid = starting
    item.winning_bidder_id = None
    session.commit()
    logger.info("Auction opened for item %s (ends %s)", item.id, end_date)
    return item


def _finalize(item):
    item.bidding_status = BIDDING_CLOSED
    # A closed auction makes the item schedulable
    if item.status == STATUS_DRAFT:
        item.status = STATUS_REPORTED


def close_auction(session, item_id, requester):
    """
    Close the open auction on ``item_id``.

    Raises ``NotFoundError``, ``UnauthorizedError`` (not owner or admin) or
    ``InvalidStateError`` (auction not open).
    """
    item = _get_item(session, item_id)
    if not can_manage_item(requester, item):
        raise UnauthorizedError("Not allowed to close this auction.")
    if item.bidding_status != BIDDING_OPEN:
        raise InvalidStateError("Auction is not open.")

    _finalize(item)
    session.commit()
    logger.info(
        "Auction closed for item %s (winner=%s, bid=%s)",
        item.id, item.winning_bidder_id, item.current_highest_bid
    )
    return item


def close_expired_auctions(session, now=None):
    """Close every open auction whose end date has passed. Returns the item ids."""
    now = now or utcnow()
    expired = session.query(Item).filter(
        Item.bidding_status == BIDDING_OPEN,
        Item.bidding_end_date.isnot(None),
        Item.bidding_end_date <= now
    ).all()
    for item in expired:
        _finalize(item)
    if expired:
        session.commit()
    closed = [item.id for item in expired]
    if closed:
        logger.info("Closed %d expired auctions", len(closed))
    return closed


def place_bid(session, item_id, bidder, amount, now=None):
    item = _get_item(session, item_id)
    if bidder is None or not getattr(bidder, "is_authenticated", False):
        raise UnauthorizedError("Login required to bid.")
    if not bidder.is_counterparty:
        raise UnauthorizedError("Only vendors can place bids.")
    if bidder.email == item.created_by:
        raise UnauthorizedError("Owners cannot bid on their own items.")

    if item.bidding_status != BIDDING_OPEN:
        raise InvalidStateError("Auction is not open.")
    now = now or utcnow()
    if item.bidding_end_date is not None and now > item.bidding_end_date:
        raise InvalidStateError("Auction has ended.")

    if isinstance(amount, bool):
        raise ValidationError("Invalid bidAmount.")
    try:
        amount = float(amount)
    except (TypeError, ValueError):
        raise ValidationError("Invalid bidAmount.")
    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError("bidAmount must be positive.")

    current = item.current_highest_bid or 0.0
    if amount <= current:
        raise ValidationError("Bid must be higher than the current highest bid.")

    bid = Bid(item_id=item.id, bidder_id=bidder.id, bid_amount=amount, created_at=now)
    session.add(bid)
    item.current_highest_bid = amount
    item.winning_bidder_id = bidder.id
    session.commit()
    logger.info("Bid %.2f on item %s by %s", amount, item.id, bidder.id)
    return bid


def bids_for_items(session, item_ids):
    if not item_ids:
        return []
    return (
        session.query(Bid)
        .filter(Bid.item_id.in_(list(item_ids)))
        .order_by(Bid.bid_amount.desc(), Bid.created_at.asc())
        .all()
    )
