from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml
from jsonschema import Draft7Validator
from platformdirs import user_config_dir

from .colors import Color, DARKER_GREEN, DESATURATED_GREEN, VIOLET, WHITE, parse_color
from .entities.components import ItemKind
from .exceptions import SettingsError

logger = logging.getLogger(__name__)

APP_NAME = "tomb-crawler"
_DATA_PKG = "tomb_crawler.data"


@dataclass(frozen=True)
class MapSettings:
    width: int = 80
    height: int = 43

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("map width/height must be > 0")


@dataclass(frozen=True)
class DungeonSettings:
    max_rooms: int = 30
    room_min_size: int = 6
    room_max_size: int = 10
    max_room_monsters: int = 3
    max_room_items: int = 2

    def __post_init__(self) -> None:
        if self.room_min_size < 1:
            raise ValueError("room_min_size must be >= 1")
        if self.room_max_size < self.room_min_size:
            raise ValueError("room_max_size must be >= room_min_size")
        if self.max_rooms < 0 or self.max_room_monsters < 0 or self.max_room_items < 0:
            raise ValueError("room and population counts must be >= 0")


@dataclass(frozen=True)
class FovSettings:
    """Torch settings. A radius of 0 means unlimited sight."""

    radius: int = 10
    light_walls: bool = True

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError("radius must be >= 0")


@dataclass(frozen=True)
class PlayerSettings:
    name: str = "player"
    glyph: str = "@"
    color: Color = WHITE
    hp: int = 30
    defense: int = 2
    power: int = 5


@dataclass(frozen=True)
class ItemSettings:
    heal_amount: int = 4
    inventory_capacity: int = 26


@dataclass(frozen=True)
class MonsterTemplate:
    name: str
    glyph: str
    color: Color
    hp: int
    defense: int
    power: int
    weight: float


@dataclass(frozen=True)
class ItemTemplate:
    name: str
    glyph: str
    color: Color
    effect: ItemKind
    weight: float = 1.0


DEFAULT_MONSTERS: Tuple[MonsterTemplate, ...] = (
    MonsterTemplate("orc", "o", DESATURATED_GREEN, hp=10, defense=0, power=3, weight=80),
    MonsterTemplate("troll", "T", DARKER_GREEN, hp=16, defense=1, power=4, weight=20),
)

DEFAULT_ITEMS: Tuple[ItemTemplate, ...] = (
    ItemTemplate("healing potion", "!", VIOLET, ItemKind.HEAL),
)


@dataclass(frozen=True)
class Settings:
    """Complete game configuration.

    Dataclass defaults mirror ``data/default_settings.yaml`` so that code and tests
    can build ``Settings()`` without touching the filesystem.
    """

    map: MapSettings = field(default_factory=MapSettings)
    dungeon: DungeonSettings = field(default_factory=DungeonSettings)
    fov: FovSettings = field(default_factory=FovSettings)
    player: PlayerSettings = field(default_factory=PlayerSettings)
    items: ItemSettings = field(default_factory=ItemSettings)
    monsters: Tuple[MonsterTemplate, ...] = DEFAULT_MONSTERS
    item_templates: Tuple[ItemTemplate, ...] = DEFAULT_ITEMS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.dungeon.room_max_size >= min(self.map.width, self.map.height):
            raise ValueError("room_max_size must be smaller than both map dimensions")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Settings":
        monsters = tuple(
            MonsterTemplate(
                name=m["name"],
                glyph=m["glyph"],
                color=parse_color(m.get("color", "white")),
                hp=int(m["hp"]),
                defense=int(m["defense"]),
                power=int(m["power"]),
                weight=float(m["weight"]),
            )
            for m in data.get("monsters", [])
        ) or DEFAULT_MONSTERS
        item_templates = tuple(
            ItemTemplate(
                name=i["name"],
                glyph=i["glyph"],
                color=parse_color(i.get("color", "white")),
                effect=ItemKind(i["effect"]),
                weight=float(i.get("weight", 1.0)),
            )
            for i in data.get("item_templates", [])
        ) or DEFAULT_ITEMS
        player = dict(data.get("player", {}))
        if "color" in player:
            player["color"] = parse_color(player["color"])
        return cls(
            map=MapSettings(**data.get("map", {})),
            dungeon=DungeonSettings(**data.get("dungeon", {})),
            fov=FovSettings(**data.get("fov", {})),
            player=PlayerSettings(**player),
            items=ItemSettings(**data.get("items", {})),
            monsters=monsters,
            item_templates=item_templates,
            seed=data.get("seed"),
        )


def _deep_merge(base: Mapping[str, Any], overlay: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    merged = dict(base)
    for k, v in (overlay or {}).items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            merged[k] = _deep_merge(base[k], v)
        else:
            merged[k] = v
    return merged


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_default_data() -> Dict[str, Any]:
    text = resources.files(_DATA_PKG).joinpath("default_settings.yaml").read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def _validator() -> Draft7Validator:
    text = resources.files(_DATA_PKG).joinpath("settings.schema.json").read_text(encoding="utf-8")
    return Draft7Validator(json.loads(text))


def validate_settings_data(data: Mapping[str, Any]) -> None:
    """Validate a raw settings mapping against the bundled JSON schema."""
    errors = sorted(_validator().iter_errors(data), key=lambda e: list(e.path))
    if errors:
        raise SettingsError("Invalid settings", errors)


def user_settings_path() -> Path:
    return Path(user_config_dir(APP_NAME)) / "settings.yaml"


def _resolve_user_path(path: Optional[Path], env: Mapping[str, str]) -> Optional[Path]:
    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        return path
    env_path = env.get("TOMB_SETTINGS")
    if env_path:
        p = Path(env_path)
        if not p.exists():
            raise FileNotFoundError(f"Settings file from TOMB_SETTINGS not found: {p}")
        return p
    default = user_settings_path()
    if default.exists():
        return default
    return None


def load_settings(path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    """Load settings from built-in defaults and an optional user override file.

    The override file is, in order of preference: ``path``, ``$TOMB_SETTINGS`` or
    ``settings.yaml`` in the platform user config directory. ``$TOMB_SEED``
    overrides the seed after merging.
    """
    env = os.environ if env is None else env
    data = _load_default_data()

    user_path = _resolve_user_path(path, env)
    if user_path is not None:
        data = _deep_merge(data, _load_yaml(user_path))
        logger.debug("Merged user settings from %s", user_path)

    seed_env = env.get("TOMB_SEED")
    if seed_env:
        try:
            data["seed"] = int(seed_env)
        except ValueError:
            logger.warning("Ignoring non-integer TOMB_SEED=%r", seed_env)

    validate_settings_data(data)
    try:
        settings = Settings.from_dict(data)
    except ValueError as exc:
        raise SettingsError(f"Invalid settings: {exc}") from exc
    logger.info(
        "Settings loaded: map %dx%d, %d rooms, seed=%s",
        settings.map.width,
        settings.map.height,
        settings.dungeon.max_rooms,
        settings.seed,
    )
    return settings


__all__ = [
    "DungeonSettings",
    "FovSettings",
    "ItemSettings",
    "ItemTemplate",
    "MapSettings",
    "MonsterTemplate",
    "PlayerSettings",
    "Settings",
    "load_settings",
    "user_settings_path",
    "validate_settings_data",
]
