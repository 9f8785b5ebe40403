from __future__ import annotations

import logging
from typing import Iterator, List, Set, Tuple

from ..map.tiles import GameMap

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


def _walk(x0: int, y0: int, x1: int, y1: int) -> Iterator[Coord]:
    dx, dy = abs(x1 - x0), -abs(y1 - y0)
    step_x = 1 if x1 > x0 else -1
    step_y = 1 if y1 > y0 else -1
    err = dx + dy
    x, y = x0, y0
    yield x, y
    while (x, y) != (x1, y1):
        doubled = err * 2
        if doubled >= dy:
            err += dy
            x += step_x
        if doubled <= dx:
            err += dx
            y += step_y
        yield x, y


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> List[Coord]:
    """Cells on the Bresenham line from (x0, y0) to (x1, y1), both ends included."""
    return list(_walk(x0, y0, x1, y1))


def has_line_of_sight(game_map: GameMap, x0: int, y0: int, x1: int, y1: int, *, light_walls: bool = True) -> bool:
    """True if nothing opaque lies strictly between the two cells.

    An opaque target counts as seen only with ``light_walls``.
    """
    if not (game_map.in_bounds(x0, y0) and game_map.in_bounds(x1, y1)):
        return False
    if game_map.blocks_sight(x1, y1) and not light_walls:
        return False
    between = bresenham_line(x0, y0, x1, y1)[1:-1]
    return not any(game_map.blocks_sight(x, y) for x, y in between)


def in_radius(dx: int, dy: int, radius: int) -> bool:
    """Circular torch radius; 0 means unlimited."""
    return radius == 0 or dx * dx + dy * dy <= radius * radius


def compute_fov(game_map: GameMap, origin: Coord, radius: int, light_walls: bool = True) -> Set[Coord]:
    """Cells visible from ``origin``: inside the torch radius and with a clear line to them.

    The origin itself is always included.
    """
    ox, oy = origin
    if not game_map.in_bounds(ox, oy):
        raise ValueError(f"FOV origin {origin} is off the map")
    if radius < 0:
        raise ValueError("radius must be >= 0")

    reach_x = game_map.width if radius == 0 else radius
    reach_y = game_map.height if radius == 0 else radius
    xs = range(max(0, ox - reach_x), min(game_map.width, ox + reach_x + 1))
    ys = range(max(0, oy - reach_y), min(game_map.height, oy + reach_y + 1))

    visible: Set[Coord] = {origin}
    for y in ys:
        for x in xs:
            if (x, y) in visible or not in_radius(x - ox, y - oy, radius):
                continue
            if has_line_of_sight(game_map, ox, oy, x, y, light_walls=light_walls):
                visible.add((x, y))

    logger.debug("FOV at %s (radius %d): %d cells", origin, radius, len(visible))
    return visible
