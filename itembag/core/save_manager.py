# itembag/core/save_manager.py
"""
Handles saving and loading of a bag to and from files.
"""
import json
import os
import time
from typing import List, Optional

from itembag.config import DEFAULT_SAVE_FILE, SAVE_FORMAT_VERSION, SAVE_GAME_DIR
from itembag.items.bag import BagDataError, ItemBag
from itembag.utils.logger import Logger


class BagSaveManager:
    def __init__(self, save_dir: str = SAVE_GAME_DIR):
        self.save_dir = save_dir

    def save(self, bag: ItemBag, filename: str = DEFAULT_SAVE_FILE) -> bool:
        """Saves the bag to a JSON file inside save_dir."""
        save_path = self._resolve_save_path(filename)
        if not save_path: return False
        Logger.info("BagSaveManager", f"Saving bag to {save_path}...")

        save_data = {
            "save_format_version": SAVE_FORMAT_VERSION,
            "save_name": os.path.splitext(os.path.basename(save_path))[0],
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            "bag": bag.to_dict(),
        }
        # Write beside the target and swap in, so a failed write never truncates the old save
        tmp_path = save_path + ".tmp"
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f: json.dump(save_data, f, indent=2)
            os.replace(tmp_path, save_path)
        except OSError as e:
            Logger.error("BagSaveManager", f"Error saving bag: {e}")
            if os.path.exists(tmp_path): os.remove(tmp_path)
            return False

        Logger.info("BagSaveManager", f"Bag saved successfully to {save_path}.")
        return True

    def load(self, filename: str = DEFAULT_SAVE_FILE, slot_number: Optional[int] = None) -> Optional[ItemBag]:
        """
        Loads a bag from a file. Returns None if the file is missing or broken.
        `slot_number` overrides the capacity stored in the file.
        """
        save_path = self._resolve_load_path(filename)
        if not save_path:
            Logger.warning("BagSaveManager", f"Save file not found: {filename}.")
            return None

        Logger.info("BagSaveManager", f"Loading bag from {save_path}...")
        try:
            with open(save_path, 'r', encoding='utf-8') as f: save_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            Logger.error("BagSaveManager", f"Error reading save '{filename}': {e}")
            return None

        if not isinstance(save_data, dict) or "bag" not in save_data:
            Logger.error("BagSaveManager", f"Save '{filename}' has no bag data.")
            return None

        version = save_data.get("save_format_version", 0)
        if isinstance(version, bool) or not isinstance(version, int):
            Logger.error("BagSaveManager", f"Save '{filename}' has an invalid format version {version!r}.")
            return None
        if version > SAVE_FORMAT_VERSION:
            Logger.warning("BagSaveManager", f"Save '{filename}' uses newer format {version}; loading anyway.")

        try:
            return ItemBag.from_dict(save_data["bag"], slot_number=slot_number)
        except BagDataError as e:
            Logger.error("BagSaveManager", f"Save '{filename}' holds an invalid bag: {e}")
            return None

    def exists(self, filename: str) -> bool:
        return self._resolve_load_path(filename) is not None

    def free_filename(self, filename: str) -> str:
        """First of name_1.json, name_2.json, ... that is not taken yet."""
        stem = os.path.splitext(self._safe_filename(filename))[0]
        counter = 1
        while self.exists(f"{stem}_{counter}"):
            counter += 1
        return f"{stem}_{counter}.json"

    def list_saves(self) -> List[str]:
        if not os.path.isdir(self.save_dir): return []
        return sorted(name for name in os.listdir(self.save_dir) if name.endswith(".json"))

    def _safe_filename(self, filename: str) -> str:
        safe_filename = "".join(c for c in os.path.basename(filename) if c.isalnum() or c in ('_', '-', '.'))
        if not safe_filename.endswith(".json"): safe_filename += ".json"
        return safe_filename

    def _resolve_save_path(self, filename: str) -> Optional[str]:
        try:
            os.makedirs(self.save_dir, exist_ok=True)
        except OSError as e:
            Logger.error("BagSaveManager", f"Error creating save directory '{self.save_dir}': {e}")
            return None
        return os.path.abspath(os.path.join(self.save_dir, self._safe_filename(filename)))

    def _resolve_load_path(self, filename: str) -> Optional[str]:
        path = os.path.abspath(os.path.join(self.save_dir, self._safe_filename(filename)))
        if os.path.exists(path): return path
        return None
