# itembag/items/bag/core.py
from typing import List, Optional, Tuple

from itembag.config import DEFAULT_BAG_SLOTS, MSG_BAD_QUANTITY, MSG_BAG_FULL, MSG_NOT_ENOUGH
from itembag.utils.logger import Logger
from .data import ItemBagData
from .display import ItemBagDisplayMixin
from .errors import (
    BagError, CapacityExceededError, InsufficientQuantityError, InvalidItemError, InvalidQuantityError
)
from .persistence import ItemBagPersistenceMixin

def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

class ItemBag(ItemBagDisplayMixin, ItemBagPersistenceMixin):
    """
    A bag with a fixed number of slots. Each slot holds one item id with a
    positive quantity. Mixins handle display strings and serialization.

    add_item/remove_item never raise for player-facing failures; they return
    False and leave the bag untouched. Use check_add/check_remove to get the
    typed error instead.
    """

    def __init__(self, slot_number: int = DEFAULT_BAG_SLOTS):
        if not _is_int(slot_number) or slot_number <= 0:
            raise ValueError(f"slot_number must be a positive integer, got {slot_number!r}")
        self._slot_number = slot_number
        self.data = ItemBagData()

    @property
    def slot_number(self) -> int:
        return self._slot_number

    # --- Checks ---

    def _validate(self, item_id: int, number: int) -> None:
        if not _is_int(item_id):
            raise InvalidItemError(f"Item id must be an integer, got {item_id!r}.")
        if not _is_int(number) or number <= 0:
            raise InvalidQuantityError(MSG_BAD_QUANTITY.format(number=number))

    def check_add(self, item_id: int, number: int) -> None:
        """Raises the BagError add_item would fail with, or returns None."""
        self._validate(item_id, number)
        if self.data.index_of(item_id) < 0 and len(self.data) == self._slot_number:
            # With every slot taken only items already held can be added
            raise CapacityExceededError(MSG_BAG_FULL.format(item_id=item_id))

    def check_remove(self, item_id: int, number: int) -> None:
        self._validate(item_id, number)
        held = self.data.get_qty(item_id)
        if held < number:
            raise InsufficientQuantityError(MSG_NOT_ENOUGH.format(item_id=item_id, held=held, needed=number))

    def can_add_item(self, item_id: int, number: int = 1) -> Tuple[bool, str]:
        try:
            self.check_add(item_id, number)
        except BagError as e:
            return False, str(e)
        return True, ""

    def can_remove_item(self, item_id: int, number: int = 1) -> Tuple[bool, str]:
        try:
            self.check_remove(item_id, number)
        except BagError as e:
            return False, str(e)
        return True, ""

    # --- Mutation ---

    def add_item(self, item_id: int, number: int = 1) -> bool:
        """Adds `number` of `item_id`. Returns whether the bag changed."""
        try:
            self.check_add(item_id, number)
        except BagError as e:
            Logger.debug("ItemBag", f"Add rejected: {e}")
            return False

        self.data.add(item_id, number)
        return True

    def remove_item(self, item_id: int, number: int = 1) -> bool:
        """Removes `number` of `item_id`. Returns whether the bag changed."""
        try:
            self.check_remove(item_id, number)
            self.data.remove(item_id, number)
        except BagError as e:
            Logger.debug("ItemBag", f"Remove rejected: {e}")
            return False
        return True

    # --- Queries ---

    def get_qty(self, item_id: int) -> int:
        return self.data.get_qty(item_id)

    def has_item(self, item_id: int, number: int = 1) -> bool:
        return self.data.get_qty(item_id) >= number

    @property
    def used_slots(self) -> int:
        return len(self.data)

    @property
    def empty_slots(self) -> int:
        return self._slot_number - len(self.data)

    @property
    def is_full(self) -> bool:
        return len(self.data) == self._slot_number

    def entries(self) -> List[Tuple[int, int]]:
        """(item_id, quantity) per occupied slot, in slot order."""
        return list(zip(self.data.ids, self.data.qty))

    def slot_at(self, index: int) -> Optional[Tuple[int, int]]:
        """Content of slot `index`, or None when that slot is empty."""
        if not 0 <= index < self._slot_number:
            raise IndexError(f"Slot {index} out of range (0..{self._slot_number - 1}).")
        if index < len(self.data):
            return self.data.ids[index], self.data.qty[index]
        return None

    def __len__(self) -> int:
        return len(self.data)

    def __contains__(self, item_id: object) -> bool:
        return self.data.index_of(item_id) >= 0 # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"ItemBag(slot_number={self._slot_number}, entries={self.entries()})"
