from .effects import ITEM_EFFECTS, UseResult, heal
from .inventory import pick_up, use_item

__all__ = ["ITEM_EFFECTS", "UseResult", "heal", "pick_up", "use_item"]
