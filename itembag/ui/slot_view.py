# itembag/ui/slot_view.py
import pygame
from typing import Callable, Optional
from itembag.config import (
    EMPTY_SLOT_QUANTITY, ICON_SIZE, QUANTITY_TEXT_COLOR,
    SLOT_BG_COLOR, SLOT_BORDER_COLOR, SLOT_SELECTED_COLOR
)
from itembag.items.item import ItemDescriptor
from itembag.ui.icons import get_item_icon

# Click callback signature: (item or None, quantity, slot) -> None
SlotCallback = Callable[[Optional[ItemDescriptor], int, 'SlotPresenter'], None]

class SlotPresenter:
    """
    One visible bag slot. Holds what it was last told to show and reports
    interactions through the callback given to initialize().
    Subclasses decide how the content is drawn.
    """

    def __init__(self):
        self.item: Optional[ItemDescriptor] = None
        self.quantity: int = EMPTY_SLOT_QUANTITY
        self.selected = False
        self._callback: Optional[SlotCallback] = None

    def initialize(self, callback: SlotCallback) -> None:
        self._callback = callback

    def update_item(self, item: Optional[ItemDescriptor], quantity: int) -> None:
        self.item = item
        self.quantity = quantity if item else EMPTY_SLOT_QUANTITY

    @property
    def is_empty(self) -> bool:
        return self.item is None

    def interact(self) -> None:
        if self._callback:
            self._callback(self.item, self.quantity, self)

class ItemSlot(SlotPresenter):
    """pygame slot: a square with the item's icon and its count."""

    def __init__(self, rect: pygame.Rect):
        super().__init__()
        self.rect = pygame.Rect(rect)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Left click inside the slot fires the callback. Returns True if handled."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.interact()
                return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(screen, SLOT_BG_COLOR, self.rect)
        border_color = SLOT_SELECTED_COLOR if self.selected else SLOT_BORDER_COLOR
        pygame.draw.rect(screen, border_color, self.rect, 2 if self.selected else 1)

        if not self.item: return

        icon = get_item_icon(self.item, min(ICON_SIZE, self.rect.width - 4))
        screen.blit(icon, icon.get_rect(center=self.rect.center))

        qty_surf = font.render(str(self.quantity), True, QUANTITY_TEXT_COLOR)
        screen.blit(qty_surf, (self.rect.right - qty_surf.get_width() - 2, self.rect.bottom - qty_surf.get_height() - 1))
