"""
Configuration for the item bag: capacity, empty-slot markers and save format.
"""

# --- Bag Defaults ---
DEFAULT_BAG_SLOTS = 10

# Quantity passed to a slot presenter that shows nothing
EMPTY_SLOT_QUANTITY = -1

# --- Persistence ---
SAVE_FORMAT_VERSION = 1

# --- Messages ---
MSG_BAG_FULL = "Your bag has no free slot for item {item_id}."
MSG_NOT_ENOUGH = "You only have {held} of item {item_id} (needed {needed})."
MSG_BAD_QUANTITY = "Quantity must be a positive whole number, got {number!r}."
