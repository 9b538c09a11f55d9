# itembag/ui/fonts.py
import pygame
from typing import Dict, Tuple
from itembag.config import FONT_NAME

_FONT_CACHE: Dict[Tuple[int, bool], pygame.font.Font] = {}

def get_font(size: int, bold: bool = False) -> pygame.font.Font:
    """System font with a fallback to pygame's bundled default."""
    key = (size, bold)
    if key in _FONT_CACHE:
        return _FONT_CACHE[key]

    if not pygame.font.get_init():
        pygame.font.init()

    try:
        font = pygame.font.SysFont(FONT_NAME, size, bold=bold)
    except (OSError, pygame.error):
        font = pygame.font.Font(None, size + 4)

    _FONT_CACHE[key] = font
    return font
