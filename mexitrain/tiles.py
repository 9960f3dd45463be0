from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Domino:
    left: int
    right: int

    def __post_init__(self) -> None:
        if self.left < 0 or self.right < 0:
            raise ValueError(f"pip values must be non-negative: {self.left}-{self.right}")

    def is_double(self) -> bool:
        return self.left == self.right

    def is_playable(self, other: "Domino") -> bool:
        return (
            self.left == other.left
            or self.left == other.right
            or self.right == other.left
            or self.right == other.right
        )

    def value(self) -> int:
        return self.left + self.right

    def has(self, pip: int) -> bool:
        return self.left == pip or self.right == pip

    def display(self) -> str:
        if self.is_double():
            return f"[{self.left}||{self.right}]"
        return f"[{self.left}|{self.right}]"

    def emoji(self) -> str:
        return f"[:d{self.left}:|:d{self.right}:]"


@dataclass
class Element:
    """A domino placed on a path. ``flipped`` only affects rendering."""

    domino: Domino
    flipped: bool = False

    @property
    def left(self) -> int:
        return self.domino.left

    @property
    def right(self) -> int:
        return self.domino.right

    def display(self) -> str:
        if self.flipped:
            return Domino(self.domino.right, self.domino.left).display()
        return self.domino.display()


def iter_full_set(max_pip: int) -> Iterable[Domino]:
    for high in range(max_pip + 1):
        for low in range(high + 1):
            yield Domino(high, low)


def full_set_size(max_pip: int) -> int:
    return (max_pip + 1) * (max_pip + 2) // 2


def open_value(prev: Optional[Domino], curr: Domino) -> Optional[int]:
    """Return the pip on ``curr`` that is still free after connecting to ``prev``.

    The left side of ``curr`` is checked against ``prev`` before the right
    side, so a double always resolves through its left pip. Without a
    predecessor the tile is read in its natural orientation (left inward).
    Returns None when ``curr`` does not touch ``prev`` at all.
    """
    if prev is None:
        return curr.right
    if prev.left == curr.left or prev.right == curr.left:
        return curr.right
    if prev.left == curr.right or prev.right == curr.right:
        return curr.left
    return None
