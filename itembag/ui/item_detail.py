# itembag/ui/item_detail.py
import pygame
from typing import TYPE_CHECKING, Optional
from itembag.config import (
    DETAIL_BG_COLOR, DETAIL_TEXT_COLOR, EMPTY_SLOT_QUANTITY, FONT_SIZE,
    SLOT_BORDER_COLOR, SLOT_SELECTED_COLOR, TITLE_FONT_SIZE
)
from itembag.items.item import ItemDescriptor
from itembag.ui.fonts import get_font
from itembag.ui.icons import get_item_icon
from itembag.utils.text_formatter import wrap_text

if TYPE_CHECKING:
    from itembag.ui.bag_view import ItemBagView
    from itembag.ui.slot_view import SlotPresenter

PADDING = 10

class ItemDetailBase:
    """What happens when a bag slot is clicked."""

    def on_click_callback(self, bag_view: 'ItemBagView', item: Optional[ItemDescriptor],
                          number: int, slot: 'SlotPresenter') -> None:
        raise NotImplementedError

    def on_bag_refreshed(self, bag_view: 'ItemBagView') -> None:
        """Called after the view re-reads the bag. Slots may have shifted."""
        pass

class ItemDetailPanel(ItemDetailBase):
    """Shows the clicked item's name, count and description, and can drop it."""

    def __init__(self, rect: Optional[pygame.Rect] = None):
        self.rect = pygame.Rect(rect) if rect else pygame.Rect(20, 300, 600, 160)
        self.bag_view: Optional['ItemBagView'] = None
        self.selected_item: Optional[ItemDescriptor] = None
        self.selected_number = EMPTY_SLOT_QUANTITY
        self.selected_slot: Optional['SlotPresenter'] = None

    def on_click_callback(self, bag_view, item, number, slot) -> None:
        self.bag_view = bag_view
        if item is None:
            self.clear_selection()
            return
        self._select(item, number, slot)

    def on_bag_refreshed(self, bag_view) -> None:
        if not self.selected_item: return
        # Follow the item to its new slot, or drop the selection if it is gone
        for slot in bag_view.all_slots:
            if slot.item and slot.item.item_id == self.selected_item.item_id:
                self._select(slot.item, slot.quantity, slot)
                return
        self.clear_selection()

    def clear_selection(self) -> None:
        if self.selected_slot:
            self.selected_slot.selected = False
        self.selected_item = None
        self.selected_number = EMPTY_SLOT_QUANTITY
        self.selected_slot = None

    def drop_selected(self, number: int = 1) -> bool:
        """Removes `number` of the selected item from the bag."""
        if not self.selected_item or not self.bag_view: return False
        return self.bag_view.remove_item(self.selected_item.item_id, number)

    def _select(self, item: ItemDescriptor, number: int, slot: 'SlotPresenter') -> None:
        if self.selected_slot and self.selected_slot is not slot:
            self.selected_slot.selected = False
        self.selected_item = item
        self.selected_number = number
        self.selected_slot = slot
        slot.selected = True

    def draw(self, screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, DETAIL_BG_COLOR, self.rect)
        pygame.draw.rect(screen, SLOT_BORDER_COLOR, self.rect, 1)

        font = get_font(FONT_SIZE)
        if not self.selected_item:
            hint = font.render("Click a slot to inspect an item.", True, DETAIL_TEXT_COLOR)
            screen.blit(hint, (self.rect.x + PADDING, self.rect.y + PADDING))
            return

        icon = get_item_icon(self.selected_item)
        screen.blit(icon, (self.rect.x + PADDING, self.rect.y + PADDING))

        title_font = get_font(TITLE_FONT_SIZE, bold=True)
        title = f"{self.selected_item.name} (x{self.selected_number})"
        title_surf = title_font.render(title, True, SLOT_SELECTED_COLOR)
        text_x = self.rect.x + PADDING * 2 + icon.get_width()
        screen.blit(title_surf, (text_x, self.rect.y + PADDING))

        y = self.rect.y + PADDING * 2 + max(icon.get_height(), title_surf.get_height())
        max_width = self.rect.right - PADDING - (self.rect.x + PADDING)
        for line in wrap_text(self.selected_item.description, max_width, lambda s: font.size(s)[0]):
            if y + font.get_linesize() > self.rect.bottom - PADDING: break
            screen.blit(font.render(line, True, DETAIL_TEXT_COLOR), (self.rect.x + PADDING, y))
            y += font.get_linesize()
