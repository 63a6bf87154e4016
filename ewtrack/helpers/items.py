"""Item registry: create, edit and delete reported e-waste items."""
import logging

from ..errors import ValidationError, NotFoundError, UnauthorizedError
from ..models.item import (
    Item,
    DEPARTMENTS,
    CLASSIFICATION_TYPES,
    STATUS_DRAFT,
    STATUS_REPORTED,
    BIDDING_DRAFT,
)
from .normalization import clean_text
from .pickups import detach_item_from_pickup

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "department", "category", "ageMonths", "condition", "classification")


def _parse_department(value):
    department = clean_text(value)
    if department not in DEPARTMENTS:
        raise ValidationError(f"Invalid department. Valid departments are {', '.join(DEPARTMENTS)}.")
    return department


def _parse_classification(value):
    """Accepts ``{"type": ...}``, a bare type string, or nothing."""
    if value in (None, "", {}):
        return None
    kind = value.get("type") if isinstance(value, dict) else value
    kind = clean_text(kind)
    if kind is None:
        return None
    if kind not in CLASSIFICATION_TYPES:
        raise ValidationError(f"Invalid classification. Valid types are {', '.join(CLASSIFICATION_TYPES)}.")
    return kind


def _parse_age(value):
    if value in (None, ""):
        return None
    if isinstance(value, bool):
        raise ValidationError("Invalid ageMonths.")
    try:
        age = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid ageMonths.")
    if age < 0:
        raise ValidationError("ageMonths cannot be negative.")
    return age


def create_item(session, data):
    if not isinstance(data, dict):
        raise ValidationError("Invalid request body.")

    name = clean_text(data.get("name"))
    category = clean_text(data.get("category"))
    created_by = clean_text(data.get("createdBy"))
    if not name or not category or not created_by:
        raise ValidationError("Missing required fields: name, category, createdBy.")

    status = clean_text(data.get("status")) or STATUS_REPORTED
    if status not in (STATUS_DRAFT, STATUS_REPORTED):
        raise ValidationError("New items must be Draft or Reported.")

    item = Item(
        name=name,
        department=_parse_department(data.get("department")),
        category=category,
        age_months=_parse_age(data.get("ageMonths")),
        condition=clean_text(data.get("condition")),
        classification_type=_parse_classification(data.get("classification")),
        status=status,
        bidding_status=BIDDING_DRAFT,
        created_by=created_by.lower(),
    )
    session.add(item)
    session.commit()
    logger.info("Item %s reported by %s", item.id, item.created_by)
    return item


def update_item(session, item_id, data):
    item = session.get(Item, item_id) if item_id else None
    if item is None:
        raise NotFoundError("Item not found.")

    if "name" in data:
        name = clean_text(data["name"])
        if not name:
            raise ValidationError("name cannot be empty.")
        item.name = name
    if "department" in data:
        item.department = _parse_department(data["department"])
    if "category" in data:
        category = clean_text(data["category"])
        if not category:
            raise ValidationError("category cannot be empty.")
        item.category = category
    if "ageMonths" in data:
        item.age_months = _parse_age(data["ageMonths"])
    if "condition" in data:
        item.condition = clean_text(data["condition"])
    if "classification" in data:
        item.classification_type = _parse_classification(data["classification"])

    session.commit()
    return item


def delete_item(session, item_id, requester_email):
    """Hard delete, owner only."""
    item = session.get(Item, item_id) if item_id else None
    if item is None:
        raise NotFoundError("Item not found.")
    if not requester_email or requester_email.strip().lower() != item.created_by:
        raise UnauthorizedError("Only the owner can delete this item.")

    detach_item_from_pickup(session, item)
    session.delete(item)
    session.commit()
    logger.info("Item %s deleted by owner", item_id)
