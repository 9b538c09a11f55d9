# itembag/ui/icons.py
import pygame
from typing import Dict, Tuple
from itembag.config import ICON_SIZE
from itembag.items.item import ItemDescriptor

# Cache for generated icons to save CPU
_ICON_CACHE: Dict[Tuple[str, int], pygame.Surface] = {}

# Colors for icon kinds (R, G, B)
ICON_COLORS = {
    "weapon": (220, 60, 60),      # Bright Red
    "armor": (120, 120, 180),     # Blue-Grey
    "potion": (80, 220, 80),      # Bright Green
    "key": (240, 240, 60),        # Bright Gold
    "coin": (230, 190, 40),       # Gold
    "gem": (60, 240, 240),        # Cyan
    "scroll": (230, 220, 180),    # Parchment
    "junk": (160, 160, 140)       # Grey
}
DEFAULT_ICON_COLOR = (200, 200, 200)

def get_item_icon(item: ItemDescriptor, size: int = ICON_SIZE) -> pygame.Surface:
    """
    Generates or retrieves a cached icon surface for an item.
    The descriptor's `icon` field picks the symbol; unknown kinds get a box.
    """
    kind = item.icon.lower()
    cache_key = (kind, size)
    if cache_key in _ICON_CACHE:
        return _ICON_CACHE[cache_key]

    surface = pygame.Surface((size, size))
    surface.fill((20, 20, 20))
    pygame.draw.rect(surface, (100, 100, 100), pygame.Rect(0, 0, size, size), 1)

    color = ICON_COLORS.get(kind, DEFAULT_ICON_COLOR)
    s = size / 32.0 # Symbols are drawn on a 32px grid

    def p(x: float, y: float) -> Tuple[int, int]:
        return int(x * s), int(y * s)

    if kind == "weapon":
        pygame.draw.line(surface, color, p(6, 26), p(26, 6), 3) # Blade
        pygame.draw.line(surface, (150, 150, 150), p(6, 26), p(12, 20), 5) # Hilt
    elif kind == "armor":
        shield_rect = pygame.Rect(p(8, 8), p(16, 16))
        pygame.draw.rect(surface, color, shield_rect)
        pygame.draw.rect(surface, (255, 255, 255), shield_rect, 1)
    elif kind == "potion":
        pygame.draw.circle(surface, color, p(16, 20), int(7 * s)) # Bottle
        pygame.draw.rect(surface, (150, 150, 150), pygame.Rect(p(14, 10), p(4, 4))) # Neck
    elif kind == "key":
        pygame.draw.circle(surface, color, p(12, 12), int(5 * s), 2) # Bow
        pygame.draw.line(surface, color, p(16, 16), p(24, 24), 2) # Shaft
    elif kind == "coin":
        pygame.draw.circle(surface, color, p(16, 16), int(9 * s))
        pygame.draw.circle(surface, (120, 90, 20), p(16, 16), int(9 * s), 1)
    elif kind == "gem":
        pygame.draw.polygon(surface, color, [p(16, 6), p(26, 16), p(16, 26), p(6, 16)])
    elif kind == "scroll":
        pygame.draw.rect(surface, color, pygame.Rect(p(8, 9), p(16, 14)))
        pygame.draw.line(surface, (90, 70, 40), p(11, 13), p(21, 13), 1)
        pygame.draw.line(surface, (90, 70, 40), p(11, 17), p(21, 17), 1)
    else:
        # Generic Box
        box_rect = pygame.Rect(p(10, 10), p(12, 12))
        pygame.draw.rect(surface, color, box_rect)
        pygame.draw.line(surface, (0, 0, 0), p(10, 10), p(22, 22), 1)

    _ICON_CACHE[cache_key] = surface
    return surface

def clear_icon_cache() -> None:
    _ICON_CACHE.clear()
