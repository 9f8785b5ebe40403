from .generator import DungeonGenerator, GenerationResult
from .rooms import Room

__all__ = ["DungeonGenerator", "GenerationResult", "Room"]
