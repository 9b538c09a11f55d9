# itembag/items/bag/__init__.py
"""
Bag Package.
Fixed-capacity item storage, capacity checks, and serialization.
"""
from .errors import (
    BagError, BagDataError, CapacityExceededError, InsufficientQuantityError,
    InvalidItemError, InvalidQuantityError
)
from .data import ItemBagData
from .core import ItemBag
