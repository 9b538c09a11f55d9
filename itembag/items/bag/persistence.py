# itembag/items/bag/persistence.py
import json
from typing import TYPE_CHECKING, Any, Dict, Optional, cast

from itembag.config import DEFAULT_BAG_SLOTS
from .errors import BagDataError

if TYPE_CHECKING:
    from itembag.items.bag.core import ItemBag

def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

class ItemBagPersistenceMixin:
    """Mixin handling JSON serialization/deserialization."""

    def to_dict(self) -> Dict[str, Any]:
        # Cast self to ItemBag to satisfy static analysis for attribute access
        bag = cast('ItemBag', self)
        return {
            "slot_number": bag.slot_number,
            "ids": list(bag.data.ids),
            "qty": list(bag.data.qty)
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], slot_number: Optional[int] = None) -> 'ItemBag':
        """
        Rebuilds a bag. `slot_number` overrides the stored capacity.
        Raises BagDataError if the data could not have come from a valid bag.
        """
        if not isinstance(data, dict):
            raise BagDataError(f"Bag data must be an object, got {type(data).__name__}.")

        capacity = slot_number if slot_number is not None else data.get("slot_number", DEFAULT_BAG_SLOTS)
        ids = data.get("ids", [])
        qty = data.get("qty", [])

        if not isinstance(ids, list) or not isinstance(qty, list):
            raise BagDataError("'ids' and 'qty' must be lists.")
        if len(ids) != len(qty):
            raise BagDataError(f"'ids' has {len(ids)} entries but 'qty' has {len(qty)}.")
        if not all(_is_int(v) for v in ids) or not all(_is_int(v) for v in qty):
            raise BagDataError("Item ids and quantities must be integers.")
        if any(v <= 0 for v in qty):
            raise BagDataError("Quantities must be positive.")
        if len(set(ids)) != len(ids):
            raise BagDataError("Item ids must be unique.")

        try:
            bag = cast('ItemBag', cls(capacity)) # type: ignore[call-arg]
        except ValueError as e:
            raise BagDataError(str(e)) from e

        if len(ids) > bag.slot_number:
            raise BagDataError(f"{len(ids)} entries do not fit in {bag.slot_number} slots.")

        bag.data.ids = list(ids)
        bag.data.qty = list(qty)
        return bag

    @classmethod
    def from_json(cls, text: str, slot_number: Optional[int] = None) -> 'ItemBag':
        try:
            data = json.loads(text)
        except (TypeError, json.JSONDecodeError) as e:
            raise BagDataError(f"Bag JSON could not be parsed: {e}") from e
        return cls.from_dict(data, slot_number=slot_number)
