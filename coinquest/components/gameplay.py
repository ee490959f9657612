"""Gameplay components: coins, collisions, the player, post-processing and generation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from coinquest.component import Component


def _read_number(data: Mapping, key: str, default):
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {value!r}")
    return value


def _read_int(data: Mapping, key: str, default: int) -> int:
    return int(_read_number(data, key, default))


def _read_float(data: Mapping, key: str, default: float) -> float:
    return float(_read_number(data, key, default))


def _read_bool(data: Mapping, key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean, got {value!r}")
    return value


def _read_str(data: Mapping, key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {value!r}")
    return value


@dataclass(eq=False)
class CoinComponent(Component):
    """A collectable coin; its score is added to the player's when collected."""

    ID: ClassVar[str] = "Coin"

    score: int = 1

    def deserialize(self, data) -> None:
        if not isinstance(data, Mapping):
            return
        self.score = _read_int(data, "score", self.score)


@dataclass(eq=False)
class CollisionComponent(Component):
    """A collidable body with a detection radius and the sound played on contact."""

    ID: ClassVar[str] = "Collision"

    detection_radius: float = 1.0
    sound_name: int = 0
    sound_path: str = ""

    def deserialize(self, data) -> None:
        if not isinstance(data, Mapping):
            return
        self.detection_radius = _read_float(data, "detectionRadius", self.detection_radius)
        self.sound_name = _read_int(data, "soundName", self.sound_name)
        self.sound_path = _read_str(data, "soundPath", self.sound_path)


@dataclass(eq=False)
class PlayerComponent(Component):
    """The player's score and remaining lives."""

    ID: ClassVar[str] = "Player"

    score: int = 0
    lives: int = 3

    def deserialize(self, data) -> None:
        if not isinstance(data, Mapping):
            return
        self.score = _read_int(data, "score", self.score)
        self.lives = _read_int(data, "lives", self.lives)


@dataclass(eq=False)
class PostProcessComponent(Component):
    """Which post-processing effect is selected and whether it is on."""

    ID: ClassVar[str] = "PostProcess"

    post_process_index: int = 0
    is_enabled: bool = False

    def deserialize(self, data) -> None:
        if not isinstance(data, Mapping):
            return
        self.is_enabled = _read_bool(data, "isEnabled", self.is_enabled)
        self.post_process_index = _read_int(data, "postProcessIndex", self.post_process_index)


@dataclass(eq=False)
class GeneratedComponent(Component):
    """Marks an entity made by the level generator, destroyed past an offset."""

    ID: ClassVar[str] = "GeneratedTag"

    destruction_offset: float = -10.0

    def deserialize(self, data) -> None:
        if not isinstance(data, Mapping):
            return
        self.destruction_offset = _read_float(data, "destructionOffset", self.destruction_offset)


@dataclass(eq=False)
class ObstacleComponent(Component):
    """Marks an entity as an obstacle; it carries no data."""

    ID: ClassVar[str] = "Obstacle"

    def deserialize(self, data) -> None:
        return None