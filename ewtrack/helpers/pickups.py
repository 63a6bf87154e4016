"""
Pickup coordination.

Two entry points create pickups:

- ``submit_pickup_address``: the owner supplies an address after an auction
  closes. The item is always updated; a pickup is created (or backfilled)
  when a vendor is given.
- ``schedule_pickup``: manual scheduling of one or more items. Returns the
  existing pickup instead of creating a duplicate.

Both rely on the unique ``pickup_items.item_id`` constraint: a concurrent
duplicate insert fails with ``IntegrityError`` and the caller falls back to
the pickup that won.
"""
import logging

from sqlalchemy.exc import IntegrityError

from ..errors import ValidationError, NotFoundError, InternalError
from ..models.item import Item, STATUS_SCHEDULED
from ..models.pickup import Pickup, PickupItem
from .normalization import (
    DEFAULT_PICKUP_OFFSET_DAYS,
    normalize_landmark,
    pickup_target_date,
    compose_pickup_note,
    parse_latitude,
    parse_longitude,
    clean_text,
    dedupe_ids,
)

logger = logging.getLogger(__name__)


def clean_vendor_id(value):
    """Stripped vendor id, None when absent. Non-string values are rejected."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("vendorId must be a string.")
    return value.strip() or None


class PickupAddressResult:
    """Outcome of an address submission."""

    def __init__(self, item, pickup=None, created=False):
        self.item = item
        self.pickup = pickup
        self.created = created

    @property
    def pickup_id(self):
        """Id of the pickup created by this call, None otherwise."""
        return self.pickup.id if self.created and self.pickup else None


def find_pickup_for_items(session, item_ids):
    """First pickup listing any of ``item_ids``, or None."""
    if not item_ids:
        return None
    return (
        session.query(Pickup)
        .join(PickupItem, PickupItem.pickup_id == Pickup.id)
        .filter(PickupItem.item_id.in_(list(item_ids)))
        .order_by(Pickup.created_at.asc())
        .first()
    )


def _insert_pickup(session, item_ids, **fields):
    """
    Insert a pickup for ``item_ids``.

    Returns ``(pickup, True)`` on success. When another pickup already holds
    one of the items the insert is rolled back and ``(existing, False)`` is
    returned.
    """
    pickup = Pickup(**fields)
    pickup.item_links = [
        PickupItem(item_id=item_id, position=position)
        for position, item_id in enumerate(item_ids)
    ]
    session.add(pickup)
    try:
        session.flush()
    except IntegrityError:
        session.rollback()
        existing = find_pickup_for_items(session, item_ids)
        if existing is None:
            raise InternalError("Could not create pickup.")
        logger.info("Pickup insert for items %s lost to existing pickup %s", item_ids, existing.id)
        return existing, False
    return pickup, True


def validate_address_payload(data):
    """
    Validate an address submission body.

    Returns ``(item_id, address, landmark, latitude, longitude, vendor_id)``
    with the landmark normalized. Raises ``ValidationError``.
    """
    if not isinstance(data, dict):
        raise ValidationError("Missing or invalid fields.")

    item_id = clean_text(data.get("itemId"))
    address = clean_text(data.get("address"))
    latitude = parse_latitude(data.get("lat"))
    longitude = parse_longitude(data.get("lng"))

    if not item_id or not address or latitude is None or longitude is None:
        raise ValidationError("Missing or invalid fields.")

    landmark = normalize_landmark(data.get("landmark"))
    vendor_id = clean_vendor_id(data.get("vendorId"))
    return item_id, address, landmark, latitude, longitude, vendor_id


def submit_pickup_address(session, item_id, address, landmark, latitude, longitude,
                          vendor_id=None, offset_days=DEFAULT_PICKUP_OFFSET_DAYS, today=None):
    """
    Record the pickup address for an item and mark it scheduled.

    The item update is committed on its own before any pickup work, so a
    failure afterwards leaves a scheduled item without a pickup. Submitting
    the address again repairs it: the pickup lookup finds nothing and
    creates one.
    """
    item = session.get(Item, item_id)
    if item is None:
        raise NotFoundError("Item not found.")

    landmark = normalize_landmark(landmark)
    item.set_pickup_address(address, landmark, latitude, longitude)
    item.status = STATUS_SCHEDULED
    session.commit()
    logger.info("Item %s scheduled with pickup address", item.id)

    if not vendor_id:
        return PickupAddressResult(item)

    existing = find_pickup_for_items(session, [item.id])
    if existing is None:
        pickup, created = _insert_pickup(
            session,
            [item.id],
            date=pickup_target_date(today=today, offset_days=offset_days),
            vendor_id=vendor_id,
            notes=compose_pickup_note(item.current_highest_bid),
            created_by=item.created_by,
            address=address,
            landmark=item.pickup_landmark,
            latitude=latitude,
            longitude=longitude,
        )
        if created:
            item.pickup_id = pickup.id
            session.commit()
            logger.info("Created pickup %s for item %s (vendor %s)", pickup.id, item.id, vendor_id)
            return PickupAddressResult(item, pickup, created=True)
        existing = pickup
        item = session.get(Item, item_id)

    if not existing.has_address:
        existing.set_address(address, landmark, latitude, longitude)
        logger.info("Backfilled address on pickup %s", existing.id)
    if item.pickup_id is None:
        item.pickup_id = existing.id
    session.commit()
    return PickupAddressResult(item, existing, created=False)


def schedule_pickup(session, item_ids, vendor_id, created_by=None, notes=None,
                    address=None, landmark=None, latitude=None, longitude=None,
                    offset_days=DEFAULT_PICKUP_OFFSET_DAYS, today=None):
    """
    Schedule a pickup for a group of items.

    Returns ``(pickup, created)``. When any of the items already belongs to a
    pickup, that pickup is returned unchanged with ``created=False``. The
    pickup date is always today plus ``offset_days``.
    """
    item_ids = dedupe_ids(item_ids)
    if not item_ids:
        raise ValidationError("Missing required fields: itemIds.")
    vendor_id = clean_vendor_id(vendor_id)
    if not vendor_id:
        raise ValidationError("Missing required fields: vendorId.")

    address_fields = {}
    address = clean_text(address)
    if address:
        lat = parse_latitude(latitude)
        lng = parse_longitude(longitude)
        if lat is None or lng is None:
            raise ValidationError("Missing or invalid fields: latitude, longitude.")
        address_fields = {
            "address": address,
            "landmark": normalize_landmark(landmark),
            "latitude": lat,
            "longitude": lng,
        }

    existing = find_pickup_for_items(session, item_ids)
    if existing is not None:
        logger.info("Items %s already have pickup %s", item_ids, existing.id)
        return existing, False

    items = session.query(Item).filter(Item.id.in_(item_ids)).all()
    by_id = {item.id: item for item in items}
    missing = [item_id for item_id in item_ids if item_id not in by_id]
    if missing:
        raise NotFoundError(f"Items not found: {', '.join(missing)}")
    ordered = [by_id[item_id] for item_id in item_ids]

    if not created_by:
        created_by = ordered[0].created_by

    if not address_fields:
        source = next((item for item in ordered if item.has_pickup_address), None)
        if source is not None:
            address_fields = {
                "address": source.pickup_address,
                "landmark": source.pickup_landmark,
                "latitude": source.pickup_latitude,
                "longitude": source.pickup_longitude,
            }

    pickup, created = _insert_pickup(
        session,
        item_ids,
        date=pickup_target_date(today=today, offset_days=offset_days),
        vendor_id=vendor_id,
        notes=clean_text(notes),
        created_by=created_by,
        **address_fields
    )
    if not created:
        return pickup, False

    for item in ordered:
        item.status = STATUS_SCHEDULED
        item.pickup_id = pickup.id
    session.commit()
    logger.info("Scheduled pickup %s for items %s (vendor %s)", pickup.id, item_ids, vendor_id)
    return pickup, True


def detach_item_from_pickup(session, item):
    """
    Remove ``item`` from its pickup before the item is deleted. A pickup left
    without items is deleted as well. Does not commit.
    """
    link = session.query(PickupItem).filter_by(item_id=item.id).first()
    if link is None:
        return
    pickup = link.pickup
    item.pickup_id = None
    pickup.item_links.remove(link)
    session.flush()
    if not pickup.item_links:
        session.delete(pickup)
        logger.info("Deleted empty pickup %s", pickup.id)
