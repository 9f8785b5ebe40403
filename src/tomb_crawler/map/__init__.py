from .tiles import Coord, GameMap, Tile

__all__ = ["Coord", "GameMap", "Tile"]
