"""Sprite state: position, depth, colour, scale and drawing attributes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


class SpriteAttr(IntFlag):
    """Attributes that control how a sprite is drawn."""

    NONE = 0
    TRANSPARENT = 0x1
    CUTOUT = 0x2
    HIDDEN = 0x4
    Z = 0x8
    SCALE = 0x10
    FASTCOPY = 0x20
    OVERLAP = 0x40
    TEXSHIFT = 0x80
    FRACPOS = 0x100
    TEXSHUF = 0x200
    EXTERN = 0x400


def _s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


@dataclass
class Sprite:
    """A sprite's placement and appearance."""

    x: int = 0
    y: int = 0
    zdepth: int = 0
    attr: SpriteAttr = SpriteAttr.NONE
    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 0
    scalex: float = 1.0
    scaley: float = 1.0

    def set_attribute(self, attr: SpriteAttr) -> None:
        """Turn the given attributes on."""
        self.attr = SpriteAttr(self.attr | attr)

    def clear_attribute(self, attr: SpriteAttr) -> None:
        """Turn the given attributes off."""
        self.attr = SpriteAttr(self.attr & ~SpriteAttr(attr))

    def hide(self) -> None:
        """Keep the sprite from being drawn."""
        self.set_attribute(SpriteAttr.HIDDEN)

    def show(self) -> None:
        """Let the sprite be drawn again."""
        self.clear_attribute(SpriteAttr.HIDDEN)

    def color(self, red: int, green: int, blue: int, alpha: int) -> None:
        """Set the colour used for intensity images; each channel is one byte."""
        self.red = red & 0xFF
        self.green = green & 0xFF
        self.blue = blue & 0xFF
        self.alpha = alpha & 0xFF

    def scale(self, sx: float, sy: float) -> None:
        """Set the scale factors; a scale of 1 in both directions turns scaling off."""
        self.scalex = sx
        self.scaley = sy
        if sx == 1.0 and sy == 1.0:
            self.clear_attribute(SpriteAttr.SCALE)
        else:
            self.set_attribute(SpriteAttr.SCALE)

    def move(self, x: int, y: int) -> None:
        """Place the sprite's top-left corner, as 16-bit screen coordinates."""
        self.x = _s16(x)
        self.y = _s16(y)

    def set_z(self, z: int) -> None:
        """Set the sprite's depth, as a 16-bit value."""
        self.zdepth = _s16(z)