from __future__ import annotations

from enum import Enum
from typing import Tuple

from .errors import RotationIndexError


class Rotation(Enum):
    """A quarter-turn rotation of a tile, counted counter-clockwise."""
    ROT0 = 0
    ROT90 = 1
    ROT180 = 2
    ROT270 = 3  # 90 degrees clockwise

    @classmethod
    def from_index(cls, idx: int) -> 'Rotation':
        """Looks up a rotation by its index 0..3, rejecting anything else."""
        if not 0 <= idx < len(ROTATIONS):
            raise RotationIndexError(f"rotation index out of range 0..3: {idx}")
        return ROTATIONS[idx]

    @property
    def degrees(self) -> int:
        return self.value * 90

    def reverse(self) -> 'Rotation':
        """Translates between clockwise and counter-clockwise rotations."""
        return ROTATIONS[-self.value % 4]

    def __add__(self, other: 'Rotation') -> 'Rotation':
        if not isinstance(other, Rotation):
            return NotImplemented
        return ROTATIONS[(self.value + other.value) % 4]


class Side(Enum):
    """The four sides of a tile, clockwise from the top.

    North/south point up/down in columns, east/west point right/left in rows.
    """
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def rotate(self, rotation: Rotation) -> 'Side':
        """Advances the side by the rotation's quarter-turn count."""
        return SIDES[(self.value + rotation.value) % 4]

    def flip(self) -> 'Side':
        """North <-> south and east <-> west."""
        return SIDES[(self.value + 2) % 4]

    @property
    def letter(self) -> str:
        return self.name[0]


ROTATIONS: Tuple[Rotation, ...] = (Rotation.ROT0, Rotation.ROT90, Rotation.ROT180, Rotation.ROT270)
SIDES: Tuple[Side, ...] = (Side.NORTH, Side.EAST, Side.SOUTH, Side.WEST)

# Canonical storage order of a tile's edges.
NESW: Tuple[Side, ...] = SIDES
