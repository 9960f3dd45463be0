from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .errors import InvalidHandIndexError
from .tiles import Domino


@dataclass(frozen=True)
class Hand:
    tiles: Tuple[Domino, ...] = ()

    @classmethod
    def from_iterable(cls, tiles: Iterable[Domino]) -> "Hand":
        return cls(tuple(tiles))

    def remove(self, index: int) -> Tuple[Domino, "Hand"]:
        if index < 0 or index >= len(self.tiles):
            raise InvalidHandIndexError(index, len(self.tiles))
        remaining = self.tiles[:index] + self.tiles[index + 1 :]
        return self.tiles[index], Hand(remaining)

    def add(self, domino: Domino) -> "Hand":
        return Hand(self.tiles + (domino,))

    def total(self) -> int:
        return sum(d.value() for d in self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Domino]:
        return iter(self.tiles)

    def __getitem__(self, index: int) -> Domino:
        return self.tiles[index]
