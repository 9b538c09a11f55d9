# itembag/items/item_table.py
"""
Read-only lookup from item id to ItemDescriptor.
Built once at startup and handed to whoever needs display data.
"""
import json
import os
from typing import Any, Dict, Iterator, List, Optional

from itembag.items.item import ItemDescriptor
from itembag.utils.logger import Logger

class UnknownItemError(KeyError):
    """Raised by ItemTable.require for an id with no descriptor."""

class ItemTable:
    def __init__(self, descriptors: Optional[List[ItemDescriptor]] = None):
        self._by_id: Dict[int, ItemDescriptor] = {}
        for descriptor in descriptors or []:
            if descriptor.item_id in self._by_id:
                Logger.warning("ItemTable", f"Duplicate item id {descriptor.item_id} ('{descriptor.name}'). Keeping the first.")
                continue
            self._by_id[descriptor.item_id] = descriptor

    @classmethod
    def from_list(cls, entries: List[Dict[str, Any]]) -> 'ItemTable':
        """Builds a table from raw dicts, skipping malformed entries."""
        descriptors = []
        for entry in entries:
            try:
                descriptors.append(ItemDescriptor.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                Logger.warning("ItemTable", f"Skipping malformed item entry {entry!r}: {e}")
        return cls(descriptors)

    @classmethod
    def load_from_file(cls, path: str) -> 'ItemTable':
        """
        Loads a JSON list of item dicts. A missing or unreadable file gives an
        empty table.
        """
        if not os.path.exists(path):
            Logger.warning("ItemTable", f"Item file not found: {path}. Using an empty table.")
            return cls()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            Logger.error("ItemTable", f"Error reading item file '{path}': {e}")
            return cls()

        if isinstance(raw, dict):
            raw = raw.get("items", [])
        if not isinstance(raw, list):
            Logger.error("ItemTable", f"Item file '{path}' must hold a list of items.")
            return cls()

        table = cls.from_list(raw)
        Logger.info("ItemTable", f"Loaded {len(table)} item(s) from {path}.")
        return table

    def get(self, item_id: int, default: Optional[ItemDescriptor] = None) -> Optional[ItemDescriptor]:
        return self._by_id.get(item_id, default)

    def require(self, item_id: int) -> ItemDescriptor:
        descriptor = self._by_id.get(item_id)
        if descriptor is None:
            raise UnknownItemError(item_id)
        return descriptor

    def ids(self) -> List[int]:
        return list(self._by_id.keys())

    def __getitem__(self, item_id: int) -> ItemDescriptor:
        return self.require(item_id)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __iter__(self) -> Iterator[ItemDescriptor]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)
