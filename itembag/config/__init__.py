"""
Initializes the config package, making all settings available for direct import.
This allows other modules to use `from itembag.config import SETTING_NAME` without
knowing which specific file the setting is in.
"""

from .config_bag import *
from .config_display import *
from .config_game import *
