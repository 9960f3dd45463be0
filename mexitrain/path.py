from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .tiles import Domino, Element, open_value


@dataclass
class Path:
    """A train of placed dominoes. ``owner`` is None only for the Mexican path."""

    owner: Optional[str] = None
    train: bool = False
    mexican: bool = False
    elements: List[Element] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.mexican:
            if self.owner is not None:
                raise ValueError("the Mexican path cannot have an owner")
            self.train = True

    @classmethod
    def mexican_path(cls) -> "Path":
        return cls(owner=None, train=True, mexican=True)

    def is_empty(self) -> bool:
        return not self.elements

    def open_to(self, player_id: str) -> bool:
        return self.owner == player_id or self.train or self.mexican

    def predecessor(self, center: Optional[Domino]) -> Optional[Domino]:
        """The tile a new domino would attach to: the tail, or the center."""
        if self.elements:
            return self.elements[-1].domino
        return center

    def exposed_value(self, center: Optional[Domino]) -> Optional[int]:
        if not self.elements:
            return None if center is None else center.left
        if len(self.elements) >= 2:
            prev: Optional[Domino] = self.elements[-2].domino
        else:
            prev = center
        return open_value(prev, self.elements[-1].domino)

    def accepts(self, domino: Domino, center: Optional[Domino]) -> bool:
        if not self.elements:
            return center is not None and center.is_playable(domino)
        exposed = self.exposed_value(center)
        return exposed is not None and domino.has(exposed)

    def element_for(self, domino: Domino, center: Optional[Domino]) -> Element:
        predecessor = self.predecessor(center)
        flipped = False
        if predecessor is not None and predecessor.is_double():
            flipped = domino.right == self.exposed_value(center)
        return Element(domino, flipped=flipped)

    def append(self, element: Element) -> None:
        self.elements.append(element)

    def tile_count(self) -> int:
        return len(self.elements)

    def display(self, unresolved: bool = False) -> str:
        if self.mexican:
            result = "       M >>"
        else:
            result = f"{self.owner:>8} >>"
        for i, element in enumerate(self.elements):
            result += f" {i}:{element.display()}"
        if self.train:
            result += " *"
        if unresolved:
            result += " <!>"
        return result
