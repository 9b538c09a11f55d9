# itembag/ui/bag_view.py
import pygame
from typing import Callable, List, Optional, Tuple
from itembag.config import (
    EMPTY_SLOT_QUANTITY, FONT_SIZE, GRID_ORIGIN, SLOT_COLUMNS, SLOT_PADDING, SLOT_SIZE
)
from itembag.items.bag import ItemBag
from itembag.items.item_table import ItemTable
from itembag.ui.fonts import get_font
from itembag.ui.item_detail import ItemDetailBase
from itembag.ui.slot_view import ItemSlot, SlotPresenter
from itembag.utils.logger import Logger

class ItemBagView:
    """
    Owns one slot presenter per bag slot and keeps them in step with the bag.
    Every successful add/remove through the view is followed by a full refresh:
    slot i shows the bag's i-th entry, the rest show the empty state.
    """

    def __init__(self,
                 bag: ItemBag,
                 item_table: ItemTable,
                 item_detail: Optional[ItemDetailBase] = None,
                 origin: Tuple[int, int] = GRID_ORIGIN,
                 columns: int = SLOT_COLUMNS,
                 slot_factory: Optional[Callable[[pygame.Rect], SlotPresenter]] = None):
        self.bag = bag
        self.item_table = item_table
        self.item_detail = item_detail
        self.origin = origin
        self.columns = max(1, columns)

        make_slot = slot_factory or ItemSlot
        self.all_slots: List[SlotPresenter] = []
        for i in range(bag.slot_number):
            slot = make_slot(self.slot_rect(i))
            slot.initialize(self._on_slot_clicked)
            self.all_slots.append(slot)

        self.refresh()

    def slot_rect(self, index: int) -> pygame.Rect:
        col, row = index % self.columns, index // self.columns
        x = self.origin[0] + col * (SLOT_SIZE + SLOT_PADDING)
        y = self.origin[1] + row * (SLOT_SIZE + SLOT_PADDING)
        return pygame.Rect(x, y, SLOT_SIZE, SLOT_SIZE)

    def _on_slot_clicked(self, item, number, slot) -> None:
        if self.item_detail:
            self.item_detail.on_click_callback(self, item, number, slot)

    def refresh(self) -> None:
        """Makes every slot show the bag's current content."""
        entries = self.bag.entries()
        for i, slot in enumerate(self.all_slots):
            if i >= len(entries):
                slot.update_item(None, EMPTY_SLOT_QUANTITY)
                continue

            item_id, quantity = entries[i]
            descriptor = self.item_table.get(item_id)
            if descriptor is None:
                Logger.warning("ItemBagView", f"No descriptor for item id {item_id} in slot {i}. Showing it as empty.")
                slot.update_item(None, EMPTY_SLOT_QUANTITY)
            else:
                slot.update_item(descriptor, quantity)

        if self.item_detail:
            self.item_detail.on_bag_refreshed(self)

    def add_item(self, item_id: int, number: int = 1) -> bool:
        if not self.bag.add_item(item_id, number): return False
        self.refresh()
        return True

    def remove_item(self, item_id: int, number: int = 1) -> bool:
        if not self.bag.remove_item(item_id, number): return False
        self.refresh()
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        for slot in self.all_slots:
            if isinstance(slot, ItemSlot) and slot.handle_event(event):
                return True
        return False

    def draw(self, screen: pygame.Surface) -> None:
        font = get_font(FONT_SIZE)
        for slot in self.all_slots:
            if isinstance(slot, ItemSlot):
                slot.draw(screen, font)
