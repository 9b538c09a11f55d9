# itembag/items/bag/display.py
from typing import TYPE_CHECKING, cast
from itembag.config import (
    FORMAT_CATEGORY, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_ERROR
)

if TYPE_CHECKING:
    from itembag.items.bag.core import ItemBag
    from itembag.items.item_table import ItemTable

class ItemBagDisplayMixin:
    """Mixin for generating text representations of the bag."""

    def list_items(self, item_table: 'ItemTable') -> str:
        """
        Lists occupied slots in slot order. Names come from the table passed in;
        ids it does not know are shown by number.
        """
        bag = cast('ItemBag', self)

        if len(bag.data) == 0:
            return f"{FORMAT_CATEGORY}Your bag is empty.{FORMAT_RESET}"

        result = []
        for item_id, quantity in bag.entries():
            descriptor = item_table.get(item_id)
            name = descriptor.name if descriptor else f"Unknown item #{item_id}"
            if quantity > 1:
                result.append(f"- {FORMAT_HIGHLIGHT}{name}{FORMAT_RESET} (x{quantity})")
            else:
                result.append(f"- {FORMAT_HIGHLIGHT}{name}{FORMAT_RESET}")

        used_slots = bag.used_slots
        slot_percent = (used_slots / bag.slot_number) * 100

        if slot_percent >= 90:
            slot_text = f"{FORMAT_ERROR}{used_slots}/{bag.slot_number}{FORMAT_RESET}"
        elif slot_percent >= 75:
            slot_text = f"{FORMAT_HIGHLIGHT}{used_slots}/{bag.slot_number}{FORMAT_RESET}"
        else:
            slot_text = f"{used_slots}/{bag.slot_number}"

        return "\n".join(result) + f"\n\n{FORMAT_CATEGORY}Slots used:{FORMAT_RESET} {slot_text}"
