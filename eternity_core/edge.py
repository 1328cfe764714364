from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable

from .errors import EdgeCodeError


@runtime_checkable
class Edge(Protocol):
    """Capability every classifiable edge value provides.

    Edge types fed to the tiles parser additionally offer ``from_code(code)``
    and ``blank()`` classmethods.
    """

    def is_border(self) -> bool:
        ...


class E2Edge(IntEnum):
    """An Eternity II edge: the grey outside edge or one of the 22 two-color patterns."""
    OUTSIDE = 0
    EDGE1 = 1
    EDGE2 = 2
    EDGE3 = 3
    EDGE4 = 4
    EDGE5 = 5
    EDGE6 = 6
    EDGE7 = 7
    EDGE8 = 8
    EDGE9 = 9
    EDGE10 = 10
    EDGE11 = 11
    EDGE12 = 12
    EDGE13 = 13
    EDGE14 = 14
    EDGE15 = 15
    EDGE16 = 16
    EDGE17 = 17
    EDGE18 = 18
    EDGE19 = 19
    EDGE20 = 20
    EDGE21 = 21
    EDGE22 = 22

    @classmethod
    def from_code(cls, code: int) -> 'E2Edge':
        if not 0 <= code < E2_EDGE_COUNT:
            raise EdgeCodeError(f"no Eternity II edge with code {code}")
        return cls(code)

    @classmethod
    def blank(cls) -> 'E2Edge':
        return cls.OUTSIDE

    def is_border(self) -> bool:
        return self is E2Edge.OUTSIDE


E2_EDGE_COUNT = len(E2Edge)
