"""Data-free tag components that mark entities for the game's systems."""

from __future__ import annotations

from typing import ClassVar

from coinquest.component import TagComponent


class ObstacleTagComponent(TagComponent):
    """Marks an obstacle the player must avoid."""

    ID: ClassVar[str] = "ObstacleTag"


class PowerupTagComponent(TagComponent):
    """Marks a power-up."""

    ID: ClassVar[str] = "powerupTag"


class HeartTagComponent(TagComponent):
    """Marks a heart that gives back a life."""

    ID: ClassVar[str] = "HeartTag"


class BlurTagComponent(TagComponent):
    """Marks an entity that triggers the blur post-process."""

    ID: ClassVar[str] = "BlurTag"


class WarnTagComponent(TagComponent):
    """Marks an entity that triggers the warning post-process."""

    ID: ClassVar[str] = "WarnTag"