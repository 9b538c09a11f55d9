# itembag/items/item.py
from dataclasses import dataclass
from typing import Any, Dict

@dataclass(frozen=True)
class ItemDescriptor:
    """
    Static metadata for one item type.
    `item_id` maps 1:1 to the item type and is what the bag stores.
    """
    item_id: int
    name: str
    icon: str = "" # Icon reference, resolved by ui.icons
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "name": self.name,
            "icon": self.icon,
            "description": self.description
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ItemDescriptor':
        item_id = data["item_id"]
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise ValueError(f"item_id must be an integer, got {item_id!r}")
        return cls(
            item_id=item_id,
            name=str(data.get("name", f"Item {item_id}")),
            icon=str(data.get("icon", "")),
            description=str(data.get("description", ""))
        )
