"""
Pure validation and normalization helpers shared by the item, auction and
pickup operations. Nothing here touches the database.
"""
import math
import re
import uuid
from datetime import date, timedelta
from typing import Iterable, List, Optional

DEFAULT_PICKUP_OFFSET_DAYS = 3
LANDMARK_PLACEHOLDER = "N/A"
PICKUP_NOTE = "Pickup for auction winner."

_ID_RE = re.compile(r"^[0-9a-f]{32}$")


def new_id() -> str:
    """Opaque identifier shared by every table (unique across tables)."""
    return uuid.uuid4().hex


def is_valid_id(value) -> bool:
    return isinstance(value, str) and bool(_ID_RE.match(value))


def normalize_landmark(value: Optional[str]) -> str:
    """
    Landmark as stored on an item or pickup.

    Blank or missing landmarks become the literal ``"N/A"``; downstream
    consumers rely on the field always being filled. Anything else is
    returned stripped.
    """
    if value is None:
        return LANDMARK_PLACEHOLDER
    text = str(value).strip()
    return text if text else LANDMARK_PLACEHOLDER


def pickup_target_date(today: Optional[date] = None, offset_days: int = DEFAULT_PICKUP_OFFSET_DAYS) -> str:
    """
    Pickup date as ``YYYY-MM-DD``: the local calendar date plus ``offset_days``.

    Uses local calendar fields (``date.today()``), not a UTC timestamp, so the
    result never lands a day off for users east or west of UTC.
    """
    base = today or date.today()
    return (base + timedelta(days=offset_days)).isoformat()


def format_amount(value) -> str:
    amount = float(value)
    if amount.is_integer():
        return str(int(amount))
    return str(amount)


def compose_pickup_note(current_highest_bid) -> str:
    if current_highest_bid is not None and float(current_highest_bid) > 0:
        return f"{PICKUP_NOTE} Final bid: ₹{format_amount(current_highest_bid)}"
    return PICKUP_NOTE


def parse_coordinate(value, lower: float, upper: float) -> Optional[float]:
    """Float coordinate within ``[lower, upper]``, or None when unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    if number < lower or number > upper:
        return None
    return number


def parse_latitude(value) -> Optional[float]:
    return parse_coordinate(value, -90.0, 90.0)


def parse_longitude(value) -> Optional[float]:
    return parse_coordinate(value, -180.0, 180.0)


def clean_text(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def dedupe_ids(values: Iterable) -> List[str]:
    """Ordered set of non-blank ids, first occurrence wins."""
    seen = set()
    result = []
    for value in values or []:
        if value is None:
            continue
        key = str(value).strip()
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(key)
    return result
