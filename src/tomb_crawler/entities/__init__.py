from .components import AiKind, DeathPolicy, Fighter, ItemKind
from .entity import Entity
from .store import EntityStore

__all__ = ["AiKind", "DeathPolicy", "Entity", "EntityStore", "Fighter", "ItemKind"]
