"""
Counterparty directory.

A pickup's ``vendor_id`` may point at a standalone ``Vendor`` record or at a
platform ``User`` whose role lets them collect (vendor or admin). Every
lookup goes through ``resolve_counterparty`` so callers never have to know
which table answered.
"""
import logging

from ..models.user import User, COUNTERPARTY_ROLES
from ..models.vendor import Vendor

logger = logging.getLogger(__name__)

UNKNOWN_VENDOR = "Unknown Vendor"

KIND_VENDOR = "vendor"
KIND_VENDOR_USER = "vendor_user"


class Counterparty:
    """Either a ``Vendor`` record or a vendor-role ``User`` record."""

    __slots__ = ("kind", "record")

    def __init__(self, kind, record):
        self.kind = kind
        self.record = record

    @classmethod
    def from_vendor(cls, vendor):
        return cls(KIND_VENDOR, vendor)

    @classmethod
    def from_user(cls, user):
        return cls(KIND_VENDOR_USER, user)

    @property
    def id(self):
        return self.record.id

    @property
    def name(self):
        return self.record.name

    @property
    def is_vendor_user(self):
        return self.kind == KIND_VENDOR_USER

    def to_dict(self):
        data = self.record.to_dict()
        data["kind"] = self.kind
        return data

    def __repr__(self):
        return f"<Counterparty {self.kind} {self.id}>"


def resolve_counterparty(session, vendor_id):
    """
    Look up ``vendor_id`` in the vendor directory, then among users with a
    vendor or admin role. Returns a ``Counterparty`` or None.
    """
    if not vendor_id:
        return None

    vendor = session.get(Vendor, vendor_id)
    if vendor is not None:
        return Counterparty.from_vendor(vendor)

    user = session.query(User).filter(
        User.id == vendor_id,
        User.role.in_(COUNTERPARTY_ROLES)
    ).first()
    if user is not None:
        return Counterparty.from_user(user)

    logger.debug("No counterparty found for id %s", vendor_id)
    return None


def resolve_vendor_name(session, vendor_id) -> str:
    counterparty = resolve_counterparty(session, vendor_id)
    return counterparty.name if counterparty else UNKNOWN_VENDOR


def resolve_vendor_names(session, vendor_ids):
    """Map each distinct id to its display name with one lookup per id."""
    names = {}
    for vendor_id in vendor_ids:
        if vendor_id not in names:
            names[vendor_id] = resolve_vendor_name(session, vendor_id)
    return names
