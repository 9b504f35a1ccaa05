"""Player save data and the health and magic rules that act on it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable


class Item(IntEnum):
    """Items whose ammunition can change."""

    ARROW = 0
    BOMB = 1
    DEKU_STICK = 2


class Sound(IntEnum):
    """Sound effect identifiers played by the player rules."""

    ERROR = 0x4806
    HEALTH_RECOVER = 0x480B
    MAGIC_REFILL = 0x401F


@dataclass
class SaveData:
    """The player's persistent state."""

    player_name: str = ""
    health_capacity: int = 0
    health: int = 0
    magic_capacity: int = 0
    magic: int = 0
    rupees: int = 0
    double_defense: bool = False
    magic_acquired: bool = False


_LOW_HEALTH_THRESHOLDS = ((0x51, 0x10), (0xA1, 0x18), (0xF1, 0x20))
_LOW_HEALTH_MAX = 0x2C
_MAGIC_REFILL_STEP = 4


def _s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _s8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


@dataclass
class Player:
    """Applies health and magic changes to a save, reporting sounds to play_sound."""

    save: SaveData = field(default_factory=SaveData)
    play_sound: Callable[[Sound], None] | None = None
    pending_magic: int = 0
    magic_requested: bool = False

    def _emit(self, sound: Sound) -> None:
        if self.play_sound is not None:
            self.play_sound(sound)

    def modify_health(self, change: int) -> bool:
        """Apply a health change; return False if the player has died."""
        change = _s16(change)
        save = self.save
        if change < 0 and save.double_defense:
            change >>= 1
        elif change > 0:
            self._emit(Sound.HEALTH_RECOVER)

        save.health = _s16(save.health + change)
        if save.health_capacity < save.health:
            save.health = save.health_capacity
        if save.health <= 0:
            save.health = 0
            return False
        return True

    def is_health_low(self) -> bool:
        """Whether health is above zero but at or under the low-health threshold."""
        save = self.save
        threshold = next(
            (limit for bound, limit in _LOW_HEALTH_THRESHOLDS if save.health_capacity < bound),
            _LOW_HEALTH_MAX,
        )
        return 0 < save.health <= threshold

    def add_magic(self, amount: int) -> None:
        """Request a magic refill if the meter is not full."""
        if self.save.magic < self.save.magic_capacity:
            self.magic_requested = True
            self.pending_magic = _s16(self.pending_magic + amount)

    def refill_magic(self) -> None:
        """Carry out a pending refill request, one step per call."""
        if not self.magic_requested:
            return
        save = self.save
        save.magic = _s8(save.magic + _MAGIC_REFILL_STEP)
        self._emit(Sound.MAGIC_REFILL)
        if save.magic >= save.magic_capacity:
            save.magic = save.magic_capacity
        self.pending_magic = 0
        self.magic_requested = False

    def consume_magic(self, amount: int) -> bool:
        """Whether the player has the magic meter and enough magic for amount."""
        save = self.save
        if not save.magic_acquired:
            return False
        if save.magic - _s16(amount) < 0:
            if save.magic_capacity != 0:
                self._emit(Sound.ERROR)
            return False
        return True