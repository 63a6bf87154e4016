from .user import User
from .vendor import Vendor
from .item import Item
from .pickup import Pickup, PickupItem
from .bid import Bid

__all__ = [
    'User',
    'Vendor',
    'Item',
    'Pickup',
    'PickupItem',
    'Bid'
]
