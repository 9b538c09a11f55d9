# itembag/core/app.py
import pygame
from typing import Optional

from itembag.config import (
    BG_COLOR, DEFAULT_BAG_SLOTS, DEFAULT_SAVE_FILE, FONT_SIZE, ITEM_TABLE_FILE,
    SCREEN_HEIGHT, SCREEN_WIDTH, TARGET_FPS, TEXT_COLOR, WINDOW_TITLE
)
from itembag.core.save_manager import BagSaveManager
from itembag.items.bag import ItemBag
from itembag.items.item_table import ItemTable
from itembag.ui.bag_view import ItemBagView
from itembag.ui.fonts import get_font
from itembag.ui.item_detail import ItemDetailPanel
from itembag.utils.logger import Logger
from itembag.utils.text_formatter import strip_format_codes

HELP_TEXT = "1-9: add item   Click: inspect   D: drop one   S: save   L: list   Esc: quit"

class BagApp:
    def __init__(self,
                 save_file: str = DEFAULT_SAVE_FILE,
                 slot_number: Optional[int] = None,
                 item_file: str = ITEM_TABLE_FILE,
                 save_manager: Optional[BagSaveManager] = None):
        self.save_file = save_file
        self.save_manager = save_manager or BagSaveManager()
        self.item_table = ItemTable.load_from_file(item_file)

        bag = self.save_manager.load(save_file, slot_number=slot_number)
        if bag is None:
            if self.save_manager.exists(save_file):
                # Keep the unreadable save intact; later saves go to a new file
                self.save_file = self.save_manager.free_filename(save_file)
                Logger.warning("BagApp", f"Could not load '{save_file}'. Saving to '{self.save_file}' instead.")
            Logger.info("BagApp", "Starting with an empty bag.")
            bag = ItemBag(slot_number or DEFAULT_BAG_SLOTS)
        self.bag = bag

        self.detail = ItemDetailPanel(pygame.Rect(20, SCREEN_HEIGHT - 200, SCREEN_WIDTH - 40, 160))
        self.view = ItemBagView(self.bag, self.item_table, self.detail)
        self.running = False

    def hotkey_item_id(self, key: int) -> Optional[int]:
        """Maps pygame number keys 1..9 onto table ids in ascending order."""
        if not pygame.K_1 <= key <= pygame.K_9: return None
        ids = sorted(self.item_table.ids())
        index = key - pygame.K_1
        return ids[index] if index < len(ids) else None

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self.handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.view.handle_event(event)

    def handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_d:
            if not self.detail.drop_selected(1):
                Logger.info("BagApp", "Nothing selected to drop.")
        elif key == pygame.K_s:
            self.save_manager.save(self.bag, self.save_file)
        elif key == pygame.K_l:
            Logger.info("BagApp", "\n" + strip_format_codes(self.bag.list_items(self.item_table)))
        else:
            item_id = self.hotkey_item_id(key)
            if item_id is None: return
            if not self.view.add_item(item_id, 1):
                _, reason = self.bag.can_add_item(item_id, 1)
                Logger.info("BagApp", reason)

    def draw(self, screen: pygame.Surface) -> None:
        screen.fill(BG_COLOR)
        self.view.draw(screen)
        self.detail.draw(screen)
        help_surf = get_font(FONT_SIZE).render(HELP_TEXT, True, TEXT_COLOR)
        screen.blit(help_surf, (20, SCREEN_HEIGHT - 30))

    def run(self) -> None:
        pygame.init()
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        self.running = True
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.draw(screen)
                pygame.display.flip()
                clock.tick(TARGET_FPS)
        finally:
            pygame.quit()
