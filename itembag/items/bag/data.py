# itembag/items/bag/data.py
from typing import List
from .errors import InsufficientQuantityError

class ItemBagData:
    """
    The held items as two parallel lists.
    ids[i] / qty[i] is the content of slot i; a new id takes the next slot.
    """

    def __init__(self):
        self.ids: List[int] = []
        self.qty: List[int] = []

    def index_of(self, item_id: int) -> int:
        """Slot index holding item_id, or -1."""
        try:
            return self.ids.index(item_id)
        except ValueError:
            return -1

    def add(self, item_id: int, number: int) -> None:
        index = self.index_of(item_id)
        if index < 0:
            # An item not yet held uses up one slot
            self.ids.append(item_id)
            self.qty.append(number)
        else:
            self.qty[index] += number

    def remove(self, item_id: int, number: int) -> None:
        index = self.index_of(item_id)
        held = self.qty[index] if index >= 0 else 0
        if held < number:
            raise InsufficientQuantityError(f"Cannot take {number} of item {item_id}: only {held} held.")

        self.qty[index] -= number
        if self.qty[index] == 0:
            # Freed slot; later entries shift down one
            del self.qty[index]
            del self.ids[index]

    def get_qty(self, item_id: int) -> int:
        index = self.index_of(item_id)
        return self.qty[index] if index >= 0 else 0

    def __len__(self) -> int:
        return len(self.ids)
