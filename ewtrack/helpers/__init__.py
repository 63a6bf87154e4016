from .normalization import (
    new_id,
    is_valid_id,
    normalize_landmark,
    pickup_target_date,
    compose_pickup_note,
    parse_latitude,
    parse_longitude,
    dedupe_ids,
)

__all__ = [
    'new_id',
    'is_valid_id',
    'normalize_landmark',
    'pickup_target_date',
    'compose_pickup_note',
    'parse_latitude',
    'parse_longitude',
    'dedupe_ids',
]
