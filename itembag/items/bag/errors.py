# itembag/items/bag/errors.py
"""Failures raised inside the bag. The public add/remove calls turn these into False."""

class BagError(Exception):
    pass

class CapacityExceededError(BagError):
    """A new item id was added while every slot was occupied."""

class InsufficientQuantityError(BagError):
    """More of an item was removed than the bag holds (including none at all)."""

class InvalidQuantityError(BagError):
    """The requested count was not a positive integer."""

class BagDataError(BagError):
    """Persisted bag data is malformed or breaks a bag invariant."""

class InvalidItemError(BagError):
    """The item id was not an integer."""
