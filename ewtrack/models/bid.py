from datetime import datetime
from ..extensions import db
from ..helpers.normalization import new_id


class Bid(db.Model):
    __tablename__ = "bids"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    item_id = db.Column(db.String(32), db.ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True)
    bidder_id = db.Column(db.String(32), nullable=False, index=True)
    bid_amount = db.Column(db.Float, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "itemId": self.item_id,
            "bidderId": self.bidder_id,
            "bidAmount": self.bid_amount,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
