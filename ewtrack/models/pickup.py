from datetime import datetime
from ..extensions import db
from ..helpers.normalization import new_id


class Pickup(db.Model):
    """One scheduled collection event for one or more items."""
    __tablename__ = "pickups"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    date = db.Column(db.String(10), nullable=False, index=True)  # YYYY-MM-DD
    vendor_id = db.Column(db.String(32), nullable=False, index=True)  # vendors.id or users.id
    notes = db.Column(db.Text)
    created_by = db.Column(db.String(255), nullable=False, index=True)

    # Address copied from the item when it becomes available
    address = db.Column(db.Text)
    landmark = db.Column(db.String(255))
    latitude = db.Column(db.Float)
    longitude = db.Column(db.Float)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    item_links = db.relationship(
        "PickupItem",
        backref="pickup",
        order_by="PickupItem.position",
        cascade="all, delete-orphan"
    )

    @property
    def item_ids(self):
        return [link.item_id for link in self.item_links]

    @property
    def has_address(self):
        return bool(self.address)

    def set_address(self, address, landmark, latitude, longitude):
        self.address = address
        self.landmark = landmark
        self.latitude = latitude
        self.longitude = longitude

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date,
            "vendorId": self.vendor_id,
            "itemIds": self.item_ids,
            "notes": self.notes,
            "createdBy": self.created_by,
            "address": self.address,
            "landmark": self.landmark,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Pickup {self.id} on {self.date} items={self.item_ids}>"


class PickupItem(db.Model):
    """
    Membership of an item in a pickup.

    ``item_id`` is unique: an item belongs to at most one pickup, enforced by
    the database rather than by a read before the insert.
    """
    __tablename__ = "pickup_items"

    id = db.Column(db.Integer, primary_key=True)
    pickup_id = db.Column(db.String(32), db.ForeignKey("pickups.id", ondelete="CASCADE"), nullable=False, index=True)
    item_id = db.Column(db.String(32), db.ForeignKey("items.id", ondelete="CASCADE"), nullable=False, unique=True)
    position = db.Column(db.Integer, nullable=False, default=0)
