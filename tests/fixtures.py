# tests/fixtures.py
import io
import os
import sys
import unittest
from typing import List, Optional, Tuple

# Headless pygame: must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'itembag'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pygame

from itembag.items.bag import ItemBag
from itembag.items.item import ItemDescriptor
from itembag.items.item_table import ItemTable
from itembag.ui.item_detail import ItemDetailBase
from itembag.ui.slot_view import SlotPresenter
from itembag.utils.logger import Logger, LogLevel

TEST_ITEMS = [
    {"item_id": 1, "name": "Healing Potion", "icon": "potion", "description": "Restores health."},
    {"item_id": 2, "name": "Iron Sword", "icon": "weapon", "description": "A plain blade."},
    {"item_id": 3, "name": "Rusty Key", "icon": "key", "description": "Opens a door."},
    {"item_id": 4, "name": "Sapphire", "icon": "gem", "description": "A blue gem."},
]

class RecordingSlot(SlotPresenter):
    """A slot presenter that remembers every update it was given."""

    def __init__(self, rect: Optional[pygame.Rect] = None):
        super().__init__()
        self.rect = rect
        self.history: List[Tuple[Optional[ItemDescriptor], int]] = []

    def update_item(self, item, quantity):
        super().update_item(item, quantity)
        self.history.append((item, quantity))

class RecordingDetail(ItemDetailBase):
    """Collects click callbacks instead of showing anything."""

    def __init__(self):
        self.clicks = []
        self.refresh_count = 0

    def on_click_callback(self, bag_view, item, number, slot):
        self.clicks.append((bag_view, item, number, slot))

    def on_bag_refreshed(self, bag_view):
        self.refresh_count += 1

class BagTestBase(unittest.TestCase):
    """Base class for bag tests. Gives each test a fresh bag and item table."""

    slot_number = 10

    def setUp(self):
        """Runs before EVERY test function."""
        # 1. Capture log output so tests stay quiet and can inspect it
        self.log_stream = io.StringIO()
        Logger.set_stream(self.log_stream)
        Logger.set_level(LogLevel.DEBUG)

        # 2. Fresh state
        self.bag = ItemBag(self.slot_number)
        self.item_table = ItemTable.from_list(TEST_ITEMS)

    def tearDown(self):
        Logger.set_stream(None)

    @property
    def log_output(self) -> str:
        return self.log_stream.getvalue()

class PygameTestBase(BagTestBase):
    """Bag tests that need pygame surfaces or fonts."""

    def setUp(self):
        super().setUp()
        pygame.font.init()
        self.screen = pygame.Surface((640, 480))

    def click_event(self, pos, button: int = 1) -> pygame.event.Event:
        return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)
