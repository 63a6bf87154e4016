from datetime import datetime
from ..extensions import db
from ..helpers.normalization import new_id


class Vendor(db.Model):
    """Lightweight directory entry for a collection vendor."""
    __tablename__ = "vendors"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    name = db.Column(db.String(120), nullable=False, index=True)
    contact = db.Column(db.String(120), nullable=False)
    certified = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "contact": self.contact,
            "certified": bool(self.certified),
        }

    def __repr__(self):
        return f"<Vendor {self.name}>"
