"""
Configuration for file paths and logging.
"""
import os

# --- Directories and Files ---
# config_game.py is in itembag/config/, so we go up three levels to get to root.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_DIR = os.path.join(BASE_DIR, "data")
SAVE_GAME_DIR = os.path.join(DATA_DIR, "saves")
ITEM_TABLE_FILE = os.path.join(DATA_DIR, "items.json")
DEFAULT_SAVE_FILE = "default_bag.json"

# --- Logging ---
# One of DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_LEVEL = "INFO"
