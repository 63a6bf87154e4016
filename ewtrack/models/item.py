from datetime import datetime
from ..extensions import db
from ..helpers.normalization import new_id

DEPARTMENTS = ("Engineering", "Sciences", "Humanities", "Administration", "Hostel", "Other")
CLASSIFICATION_TYPES = ("Hazardous", "Reusable", "Recyclable")

# Fulfillment status
STATUS_DRAFT = "Draft"
STATUS_REPORTED = "Reported"
STATUS_SCHEDULED = "Scheduled"
ITEM_STATUSES = (STATUS_DRAFT, STATUS_REPORTED, STATUS_SCHEDULED)

# Auction phase, independent of the fulfillment status
BIDDING_DRAFT = "draft"
BIDDING_OPEN = "open"
BIDDING_CLOSED = "closed"
BIDDING_STATUSES = (BIDDING_DRAFT, BIDDING_OPEN, BIDDING_CLOSED)


class Item(db.Model):
    __tablename__ = "items"
    id = db.Column(db.String(32), primary_key=True, default=new_id)

    name = db.Column(db.String(200), nullable=False)
    department = db.Column(db.String(40), nullable=False, index=True)
    category = db.Column(db.String(120), nullable=False)
    age_months = db.Column(db.Integer, nullable=True)
    condition = db.Column(db.String(120), nullable=True)
    classification_type = db.Column(db.String(20), nullable=True)  # Hazardous, Reusable, Recyclable

    status = db.Column(db.String(20), default=STATUS_REPORTED, nullable=False, index=True)

    # Auction
    bidding_status = db.Column(db.String(10), default=BIDDING_DRAFT, nullable=False, index=True)
    current_highest_bid = db.Column(db.Float, nullable=True)
    winning_bidder_id = db.Column(db.String(32), nullable=True)  # vendors.id or users.id
    bidding_end_date = db.Column(db.DateTime, nullable=True)

    # Pickup address
    pickup_address = db.Column(db.Text, nullable=True)
    pickup_landmark = db.Column(db.String(255), nullable=True)
    pickup_latitude = db.Column(db.Float, nullable=True)
    pickup_longitude = db.Column(db.Float, nullable=True)

    pickup_id = db.Column(db.String(32), db.ForeignKey("pickups.id", ondelete="SET NULL"), nullable=True, index=True)

    created_by = db.Column(db.String(255), nullable=False, index=True)  # owner email
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    bids = db.relationship("Bid", backref="item", lazy="dynamic", cascade="all, delete-orphan")

    @property
    def has_pickup_address(self):
        return bool(self.pickup_address)

    def set_pickup_address(self, address, landmark, latitude, longitude):
        self.pickup_address = address
        self.pickup_landmark = landmark
        self.pickup_latitude = latitude
        self.pickup_longitude = longitude

    def pickup_address_dict(self):
        if not self.pickup_address:
            return None
        return {
            "address": self.pickup_address,
            "landmark": self.pickup_landmark,
            "latitude": self.pickup_latitude,
            "longitude": self.pickup_longitude,
        }

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "department": self.department,
            "category": self.category,
            "ageMonths": self.age_months,
            "condition": self.condition,
            "classification": {"type": self.classification_type} if self.classification_type else None,
            "status": self.status,
            "biddingStatus": self.bidding_status,
            "currentHighestBid": self.current_highest_bid,
            "winningBidderId": self.winning_bidder_id,
            "biddingEndDate": self.bidding_end_date.isoformat() if self.bidding_end_date else None,
            "pickupAddress": self.pickup_address_dict(),
            "pickupId": self.pickup_id,
            "createdBy": self.created_by,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Item {self.id} {self.name!r} {self.status}/{self.bidding_status}>"
