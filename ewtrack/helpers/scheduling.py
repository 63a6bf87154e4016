"""Read model behind the owner's scheduling dashboard."""
from ..models.item import Item, STATUS_REPORTED, STATUS_SCHEDULED
from ..models.pickup import Pickup
from ..models.vendor import Vendor
from .directory import resolve_vendor_names

UNKNOWN_ITEM = "Unknown Item"


def _populate_pickup(session, pickup, item_map, vendor_names):
    items = []
    for item_id in pickup.item_ids:
        item = item_map.get(item_id)
        if item is None:
            item = session.get(Item, item_id)
        if item is not None:
            items.append({"id": item.id, "name": item.name, "pickupAddress": item.pickup_address_dict()})
        else:
            items.append({"id": item_id, "name": UNKNOWN_ITEM})

    data = pickup.to_dict()
    data["itemIds"] = items
    data["vendorName"] = vendor_names[pickup.vendor_id]
    return data


def scheduling_overview(session, user_email):
    email = user_email.strip().lower()

    vendors = session.query(Vendor).order_by(Vendor.name.asc()).all()
    schedulable = (
        session.query(Item)
        .filter(Item.created_by == email, Item.status.in_((STATUS_REPORTED, STATUS_SCHEDULED)))
        .order_by(Item.created_at.desc())
        .all()
    )
    pickups = (
        session.query(Pickup)
        .filter(Pickup.created_by == email)
        .order_by(Pickup.date.desc(), Pickup.created_at.desc())
        .all()
    )

    item_map = {item.id: item for item in schedulable}
    vendor_names = resolve_vendor_names(session, [p.vendor_id for p in pickups])

    return {
        "vendors": [v.to_dict() for v in vendors],
        "schedulableItems": [
            {
                "id": item.id,
                "name": item.name,
                "pickupAddress": item.pickup_address_dict(),
                "status": item.status,
                "createdBy": item.created_by,
            }
            for item in schedulable
        ],
        "pickups": [p.to_dict() for p in pickups],
        "populatedPickups": [_populate_pickup(session, p, item_map, vendor_names) for p in pickups],
    }
